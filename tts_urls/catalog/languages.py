from __future__ import annotations

from enum import Enum

# code -> (display name, published voices)
VOICERSS_LANGUAGES: dict[str, tuple[str, list[str]]] = {
    "ar-eg": ("Arabic (Egypt)", ["Oda"]),
    "ar-sa": ("Arabic (Saudi Arabia)", ["Salim"]),
    "bg-bg": ("Bulgarian", ["Dimitar"]),
    "ca-es": ("Catalan", ["Rut"]),
    "zh-cn": ("Chinese (China)", ["Luli", "Shu", "Chow", "Wang"]),
    "zh-hk": ("Chinese (Hong Kong)", ["Jia", "Xia", "Chen"]),
    "zh-tw": ("Chinese (Taiwan)", ["Akemi", "Lin", "Lee"]),
    "hr-hr": ("Croatian", ["Nikola"]),
    "cs-cz": ("Czech", ["Josef"]),
    "da-dk": ("Danish", ["Freja"]),
    "nl-be": ("Dutch (Belgium)", ["Daan"]),
    "nl-nl": ("Dutch (Netherlands)", ["Lotte", "Bram"]),
    "en-au": ("English (Australia)", ["Zoe", "Isla", "Evie", "Jack"]),
    "en-ca": ("English (Canada)", ["Rose", "Clara", "Emma", "Mason"]),
    "en-gb": ("English (Great Britain)", ["Alice", "Nancy", "Lily", "Harry"]),
    "en-in": ("English (India)", ["Eka", "Jai", "Ajit"]),
    "en-ie": ("English (Ireland)", ["Oran"]),
    "en-us": ("English (United States)", ["Linda", "Amy", "Mary", "John", "Mike"]),
    "fi-fi": ("Finnish", ["Aada"]),
    "fr-ca": ("French (Canada)", ["Emile", "Olivia", "Logan", "Felix"]),
    "fr-fr": ("French (France)", ["Bette", "Iva", "Zola", "Axel"]),
    "fr-ch": ("French (Switzerland)", ["Theo"]),
    "de-at": ("German (Austria)", ["Lukas"]),
    "de-de": ("German (Germany)", ["Hanna", "Lina", "Jonas"]),
    "de-ch": ("German (Switzerland)", ["Tim"]),
    "el-gr": ("Greek", ["Neo"]),
    "he-il": ("Hebrew", ["Rami"]),
    "hi-in": ("Hindi", ["Puja", "Kabir"]),
    "hu-hu": ("Hungarian", ["Mate"]),
    "id-id": ("Indonesian", ["Intan"]),
    "it-it": ("Italian", ["Bria", "Mia", "Pietro"]),
    "ja-jp": ("Japanese", ["Hina", "Airi", "Fumi", "Akira"]),
    "ko-kr": ("Korean", ["Nari"]),
    "ms-my": ("Malay", ["Aqil"]),
    "nb-no": ("Norwegian", ["Marte", "Erik"]),
    "pl-pl": ("Polish", ["Julia", "Jan"]),
    "pt-br": ("Portuguese (Brazil)", ["Marcia", "Ligia", "Yara", "Dinis"]),
    "pt-pt": ("Portuguese (Portugal)", ["Leonor"]),
    "ro-ro": ("Romanian", ["Doru"]),
    "ru-ru": ("Russian", ["Olga", "Marina", "Peter"]),
    "sk-sk": ("Slovak", ["Beda"]),
    "sl-si": ("Slovenian", ["Vid"]),
    "es-mx": ("Spanish (Mexico)", ["Juana", "Silvia", "Teresa", "Jose"]),
    "es-es": ("Spanish (Spain)", ["Camila", "Sofia", "Luna", "Diego"]),
    "sv-se": ("Swedish", ["Molly", "Hugo"]),
    "ta-in": ("Tamil", ["Sai"]),
    "th-th": ("Thai", ["Ukrit"]),
    "tr-tr": ("Turkish", ["Omer"]),
    "vi-vn": ("Vietnamese", ["Chi"]),
}


class Language(str, Enum):
    AR_EG = "ar-eg"
    AR_SA = "ar-sa"
    BG_BG = "bg-bg"
    CA_ES = "ca-es"
    ZH_CN = "zh-cn"
    ZH_HK = "zh-hk"
    ZH_TW = "zh-tw"
    HR_HR = "hr-hr"
    CS_CZ = "cs-cz"
    DA_DK = "da-dk"
    NL_BE = "nl-be"
    NL_NL = "nl-nl"
    EN_AU = "en-au"
    EN_CA = "en-ca"
    EN_GB = "en-gb"
    EN_IN = "en-in"
    EN_IE = "en-ie"
    EN_US = "en-us"
    FI_FI = "fi-fi"
    FR_CA = "fr-ca"
    FR_FR = "fr-fr"
    FR_CH = "fr-ch"
    DE_AT = "de-at"
    DE_DE = "de-de"
    DE_CH = "de-ch"
    EL_GR = "el-gr"
    HE_IL = "he-il"
    HI_IN = "hi-in"
    HU_HU = "hu-hu"
    ID_ID = "id-id"
    IT_IT = "it-it"
    JA_JP = "ja-jp"
    KO_KR = "ko-kr"
    MS_MY = "ms-my"
    NB_NO = "nb-no"
    PL_PL = "pl-pl"
    PT_BR = "pt-br"
    PT_PT = "pt-pt"
    RO_RO = "ro-ro"
    RU_RU = "ru-ru"
    SK_SK = "sk-sk"
    SL_SI = "sl-si"
    ES_MX = "es-mx"
    ES_ES = "es-es"
    SV_SE = "sv-se"
    TA_IN = "ta-in"
    TH_TH = "th-th"
    TR_TR = "tr-tr"
    VI_VN = "vi-vn"

    @property
    def display_name(self) -> str:
        return VOICERSS_LANGUAGES[self.value][0]

    @property
    def voices(self) -> list[str]:
        return list(VOICERSS_LANGUAGES[self.value][1])

    def to_wire_string(self) -> str:
        return self.value

    @classmethod
    def from_wire_string(cls, value: str) -> Language | None:
        """Parse a language code such as ``en-us``, ``EN-US`` or ``en_us``."""
        normalized = value.lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            return None


DEFAULT_LANGUAGE = Language.EN_US


def voices_for(language: Language | str) -> list[str]:
    parsed = language if isinstance(language, Language) else Language.from_wire_string(language)
    if parsed is None:
        return []
    return parsed.voices
