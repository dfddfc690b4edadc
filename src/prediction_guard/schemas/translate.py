"""Data types for the translate endpoint."""

from prediction_guard.registry import LanguageCode
from prediction_guard.schemas.base import RequestModel, ResponseModel

PATH = "/translate"


class TranslateRequest(RequestModel):
    """Translate ``text`` from ``source_lang`` to ``target_lang``.

    ``use_third_party_engine`` lets the service also ask engines such as
    OpenAI, DeepL and Google and return the best scoring translation.
    """

    text: str
    source_lang: LanguageCode
    target_lang: LanguageCode
    use_third_party_engine: bool = False


class Translation(ResponseModel):
    score: float = 0.0
    translation: str = ""
    model: str = ""
    status: str = ""


class TranslateResponse(ResponseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    best_translation: str = ""
    best_score: float = 0.0
    best_translation_model: str = ""
    translations: list[Translation] = []
