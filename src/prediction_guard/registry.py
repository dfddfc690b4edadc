"""Known model and language identifiers and their wire strings.

Both enumerations are open-ended: an identifier the client does not know
about is carried as ``Other(raw)`` so that it still round-trips through
serialize and deserialize unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Union

from pydantic import PlainSerializer, PlainValidator


@dataclass(frozen=True, slots=True)
class Other:
    """An identifier with no entry in the known tables."""

    value: str

    def __str__(self) -> str:
        return self.value


class Model(str, Enum):
    """Models served by Prediction Guard. Values are the wire strings."""

    HERMES_2_PRO_LLAMA_3_8B = "Hermes-2-Pro-Llama-3-8B"
    NOUS_HERMES_LLAMA2_13B = "Nous-Hermes-Llama2-13B"
    HERMES_2_PRO_MISTRAL_7B = "Hermes-2-Pro-Mistral-7B"
    NEURAL_CHAT_7B = "Neural-Chat-7B"
    NEURAL_CHAT_7B_V3_3 = "neural-chat-7b-v3-3"
    LLAMA_3_SQLCODER_8B = "llama-3-sqlcoder-8b"
    DEEPSEEK_CODER_6_7B_INSTRUCT = "deepseek-coder-6.7b-instruct"
    YI_34B_CHAT = "Yi-34B-Chat"
    LLAVA_1_5_7B_HF = "llava-1.5-7b-hf"
    BRIDGETOWER_LARGE_ITM_MLM_ITC = "bridgetower-large-itm-mlm-itc"
    BGE_RERANKER_V2_M3 = "bge-reranker-v2-m3"


class Language(str, Enum):
    """Languages supported by the translate endpoint. Values are ISO 639-3 codes."""

    AFRIKAANS = "afr"
    AMHARIC = "amh"
    ARABIC = "ara"
    ARMENIAN = "hye"
    AZERBAIJAN = "aze"
    BASQUE = "eus"
    BELARUSIAN = "bel"
    BENGALI = "ben"
    BOSNIAN = "bos"
    CATALAN = "cat"
    CHECHEN = "che"
    CHEROKEE = "chr"
    CHINESE = "zho"
    CROATIAN = "hrv"
    CZECH = "ces"
    DANISH = "dan"
    DUTCH = "nld"
    ENGLISH = "eng"
    ESTONIAN = "est"
    FIJIAN = "fij"
    FILIPINO = "fil"
    FINNISH = "fin"
    FRENCH = "fra"
    GALICIAN = "glg"
    GEORGIAN = "kat"
    GERMAN = "deu"
    GREEK = "ell"
    GUJARATI = "guj"
    HAITIAN = "hat"
    HEBREW = "heb"
    HINDI = "hin"
    HUNGARIAN = "hun"
    ICELANDIC = "isl"
    INDONESIAN = "ind"
    IRISH = "gle"
    ITALIAN = "ita"
    JAPANESE = "jpn"
    KANNADA = "kan"
    KAZAKH = "kaz"
    KOREAN = "kor"
    LATVIAN = "lav"
    LITHUANIAN = "lit"
    MACEDONIAN = "mkd"
    MALAY = "msa"
    MALAY_STANDARD = "zlm"
    MALAYALAM = "mal"
    MALTESE = "mlt"
    MARATHI = "mar"
    NEPALI = "nep"
    NORWEGIAN = "nor"
    PERSIAN = "fas"
    POLISH = "pol"
    PORTUGUESE = "por"
    ROMANIAN = "ron"
    RUSSIAN = "rus"
    SAMOAN = "smo"
    SERBIAN = "srp"
    SLOVAK = "slk"
    SLOVENIAN = "slv"
    SLAVONIC = "chu"
    SPANISH = "spa"
    SWAHILI = "swh"
    SWEDISH = "swe"
    TAMIL = "tam"
    TELUGU = "tel"
    THAI = "tha"
    TURKISH = "tur"
    UKRAINIAN = "ukr"
    URDU = "urd"
    WELSH = "cym"
    VIETNAMESE = "vie"


ModelId = Union[Model, Other]
LanguageId = Union[Language, Other]

_MODELS_BY_WIRE: dict[str, Model] = {m.value: m for m in Model}
_LANGUAGES_BY_WIRE: dict[str, Language] = {lang.value: lang for lang in Language}


def model_to_wire(model: ModelId | str) -> str:
    if isinstance(model, Model):
        return model.value
    return str(model)


def model_from_wire(value: ModelId | str) -> ModelId:
    """Map a wire string to a known Model, or Other when it is not in the table."""
    if isinstance(value, (Model, Other)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"model identifier must be a string, got {type(value).__name__}")
    return _MODELS_BY_WIRE.get(value, Other(value))


def language_to_wire(language: LanguageId | str) -> str:
    if isinstance(language, Language):
        return language.value
    return str(language)


def language_from_wire(value: LanguageId | str) -> LanguageId:
    """Map an ISO 639-3 code to a known Language, or Other when it is not in the table."""
    if isinstance(value, (Language, Other)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"language code must be a string, got {type(value).__name__}")
    return _LANGUAGES_BY_WIRE.get(value, Other(value))


# Field types used by the request/response schemas.
ModelName = Annotated[
    ModelId,
    PlainValidator(model_from_wire),
    PlainSerializer(model_to_wire, return_type=str),
]
LanguageCode = Annotated[
    LanguageId,
    PlainValidator(language_from_wire),
    PlainSerializer(language_to_wire, return_type=str),
]
