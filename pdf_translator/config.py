"""
Configuration constants for the PDF Translator.
"""

import os
from typing import Dict, List, Tuple

# Translation endpoint (Google Cloud Translation v2)
GOOGLE_TRANSLATE_API_ENDPOINT: str = "https://translation.googleapis.com/language/translate/v2"
ENDPOINT_ENV_VAR: str = "PDF_TRANSLATOR_ENDPOINT"

# Request parameters
TRANSLATION_FORMAT: str = "text"
MAX_REQUEST_BYTES: int = 5000

# Default languages
DEFAULT_SOURCE_LANGUAGE: str = "en"
DEFAULT_TARGET_LANGUAGE: str = "sv"

# Output
DEFAULT_OUTPUT_FILE: str = "translated_text.txt"

# Credentials file
CONFIG_ENV_VAR: str = "PDF_TRANSLATOR_CONFIG"
CONFIG_FILE_NAME: str = "credentials.env"
CONFIG_QUALIFIER: str = "com"
CONFIG_ORGANIZATION: str = "pdf_translator_company"
CONFIG_APPLICATION: str = "PDF Translator"

# Keys stored in the credentials file, by Credentials field name
CREDENTIAL_KEYS: Dict[str, str] = {
    'api_key': 'API_KEY',
    'project_id': 'PROJECT_ID',
    'access_token': 'ACCESS_TOKEN',
}

# pdftotext / Poppler
PDFTOTEXT_BINARY: str = "pdftotext"
PDFTOTEXT_LAYOUT_FLAG: str = "-layout"
PDFTOTEXT_VERSION_FLAG: str = "-v"
POPPLER_SIGNATURE: str = "Poppler"

# Linux package managers in priority order, with the install command for each
LINUX_PACKAGE_MANAGERS: List[Tuple[str, List[str]]] = [
    ("apt", ["install", "-y", "poppler-utils"]),
    ("yum", ["install", "-y", "poppler-utils"]),
    ("pacman", ["-S", "--noconfirm", "poppler"]),
]

HOMEBREW_INSTALL_SCRIPT: str = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
CHOCOLATEY_INSTALL_SCRIPT: str = (
    "Set-ExecutionPolicy Bypass -Scope Process -Force; "
    "[System.Net.ServicePointManager]::SecurityProtocol = "
    "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072; "
    "iex ((New-Object System.Net.WebClient).DownloadString('https://chocolatey.org/install.ps1'))"
)

# Sentence boundary used when regrouping lines into paragraphs
SENTENCE_BOUNDARY: str = r'(?<=[.!?])\s+'

# Languages supported by Google Translate (name, ISO-639 code)
SUPPORTED_LANGUAGES: List[Tuple[str, str]] = [
    ("Afrikaans", "af"),
    ("Albanian", "sq"),
    ("Amharic", "am"),
    ("Arabic", "ar"),
    ("Armenian", "hy"),
    ("Assamese", "as"),
    ("Aymara", "ay"),
    ("Azerbaijani", "az"),
    ("Bambara", "bm"),
    ("Basque", "eu"),
    ("Belarusian", "be"),
    ("Bengali", "bn"),
    ("Bhojpuri", "bho"),
    ("Bosnian", "bs"),
    ("Bulgarian", "bg"),
    ("Catalan", "ca"),
    ("Cebuano", "ceb"),
    ("Chinese (Simplified)", "zh-CN or zh"),
    ("Chinese (Traditional)", "zh-TW"),
    ("Corsican", "co"),
    ("Croatian", "hr"),
    ("Czech", "cs"),
    ("Danish", "da"),
    ("Dhivehi", "dv"),
    ("Dogri", "doi"),
    ("Dutch", "nl"),
    ("English", "en"),
    ("Esperanto", "eo"),
    ("Estonian", "et"),
    ("Ewe", "ee"),
    ("Filipino (Tagalog)", "fil"),
    ("Finnish", "fi"),
    ("French", "fr"),
    ("Frisian", "fy"),
    ("Galician", "gl"),
    ("Georgian", "ka"),
    ("German", "de"),
    ("Greek", "el"),
    ("Guarani", "gn"),
    ("Gujarati", "gu"),
    ("Haitian Creole", "ht"),
    ("Hausa", "ha"),
    ("Hawaiian", "haw"),
    ("Hebrew", "he or iw"),
    ("Hindi", "hi"),
    ("Hmong", "hmn"),
    ("Hungarian", "hu"),
    ("Icelandic", "is"),
    ("Igbo", "ig"),
    ("Ilocano", "ilo"),
    ("Indonesian", "id"),
    ("Irish", "ga"),
    ("Italian", "it"),
    ("Japanese", "ja"),
    ("Javanese", "jv or jw"),
    ("Kannada", "kn"),
    ("Kazakh", "kk"),
    ("Khmer", "km"),
    ("Kinyarwanda", "rw"),
    ("Konkani", "gom"),
    ("Korean", "ko"),
    ("Krio", "kri"),
    ("Kurdish", "ku"),
    ("Kurdish (Sorani)", "ckb"),
    ("Kyrgyz", "ky"),
    ("Lao", "lo"),
    ("Latin", "la"),
    ("Latvian", "lv"),
    ("Lingala", "ln"),
    ("Lithuanian", "lt"),
    ("Luganda", "lg"),
    ("Luxembourgish", "lb"),
    ("Macedonian", "mk"),
    ("Maithili", "mai"),
    ("Malagasy", "mg"),
    ("Malay", "ms"),
    ("Malayalam", "ml"),
    ("Maltese", "mt"),
    ("Maori", "mi"),
    ("Marathi", "mr"),
    ("Meiteilon (Manipuri)", "mni-Mtei"),
    ("Mizo", "lus"),
    ("Mongolian", "mn"),
    ("Myanmar (Burmese)", "my"),
    ("Nepali", "ne"),
    ("Norwegian", "no"),
    ("Nyanja (Chichewa)", "ny"),
    ("Odia (Oriya)", "or"),
    ("Oromo", "om"),
    ("Pashto", "ps"),
    ("Persian", "fa"),
    ("Polish", "pl"),
    ("Portuguese (Portugal, Brazil)", "pt"),
    ("Punjabi", "pa"),
    ("Quechua", "qu"),
    ("Romanian", "ro"),
    ("Russian", "ru"),
    ("Samoan", "sm"),
    ("Sanskrit", "sa"),
    ("Scots Gaelic", "gd"),
    ("Sepedi", "nso"),
    ("Serbian", "sr"),
    ("Sesotho", "st"),
    ("Shona", "sn"),
    ("Sindhi", "sd"),
    ("Sinhala (Sinhalese)", "si"),
    ("Slovak", "sk"),
    ("Slovenian", "sl"),
    ("Somali", "so"),
    ("Spanish", "es"),
    ("Sundanese", "su"),
    ("Swahili", "sw"),
    ("Swedish", "sv"),
    ("Tagalog (Filipino)", "tl"),
    ("Tajik", "tg"),
    ("Tamil", "ta"),
    ("Tatar", "tt"),
    ("Telugu", "te"),
    ("Thai", "th"),
    ("Tigrinya", "ti"),
    ("Tsonga", "ts"),
    ("Turkish", "tr"),
    ("Turkmen", "tk"),
    ("Twi (Akan)", "ak"),
    ("Ukrainian", "uk"),
    ("Urdu", "ur"),
    ("Uyghur", "ug"),
    ("Uzbek", "uz"),
    ("Vietnamese", "vi"),
    ("Welsh", "cy"),
    ("Xhosa", "xh"),
    ("Yiddish", "yi"),
    ("Yoruba", "yo"),
    ("Zulu", "zu"),
]


def get_endpoint() -> str:
    """Get the translation endpoint, honouring the environment override."""
    return os.getenv(ENDPOINT_ENV_VAR) or GOOGLE_TRANSLATE_API_ENDPOINT
