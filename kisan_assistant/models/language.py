from enum import Enum


class Language(str, Enum):
    EN = "en"
    HI = "hi"
    PA = "pa"
    MR = "mr"
    TE = "te"
    TA = "ta"
    KN = "kn"


LANGUAGE_NAMES = {
    Language.EN: "English",
    Language.HI: "Hindi",
    Language.PA: "Punjabi",
    Language.MR: "Marathi",
    Language.TE: "Telugu",
    Language.TA: "Tamil",
    Language.KN: "Kannada",
}


def language_name(code: str) -> str:
    try:
        return LANGUAGE_NAMES[Language(code)]
    except ValueError:
        return LANGUAGE_NAMES[Language.EN]
