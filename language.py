import re
import locale

LANGUAGE_KEY = "Language"
DEFAULT = "default"
FALLBACK_CULTURE = "en-US"

# Cultures with their own message table
UI_LANGUAGES = ["en-US", "zh-CN"]
COMPLETIONS = [DEFAULT, "zh-CN", "en-US"]

_CULTURE_RE = re.compile(
    r"^(?P<lang>[a-z]{2,3})"
    r"(?:[-_](?P<script>[a-z]{4}))?"
    r"(?:[-_](?P<region>[a-z]{2}|\d{3}))?$",
    re.IGNORECASE,
)

LANGUAGE_NAMES = {
    "en-US": {"en": "English", "zh": "Chinese", "ja": "Japanese", "ko": "Korean",
              "fr": "French", "de": "German", "es": "Spanish", "ru": "Russian"},
    "zh-CN": {"en": "英语", "zh": "中文", "ja": "日语", "ko": "韩语",
              "fr": "法语", "de": "德语", "es": "西班牙语", "ru": "俄语"},
}

REGION_NAMES = {
    "en-US": {"US": "United States", "GB": "United Kingdom", "CN": "China", "TW": "Taiwan",
              "HK": "Hong Kong SAR", "JP": "Japan", "KR": "Korea", "FR": "France",
              "DE": "Germany", "ES": "Spain", "RU": "Russia"},
    "zh-CN": {"US": "美国", "GB": "英国", "CN": "中国", "TW": "台湾", "HK": "香港特别行政区",
              "JP": "日本", "KR": "韩国", "FR": "法国", "DE": "德国", "ES": "西班牙", "RU": "俄罗斯"},
}


def is_default(code):
    return code is None or code.strip().lower() in (DEFAULT, "null")


def _known_language(lang):
    return lang in locale.locale_alias or any(k.startswith(lang + "_") for k in locale.locale_alias)


def parse_culture(code):
    """Returns (culture, None) for a usable culture identifier, else (None, error message)."""
    match = _CULTURE_RE.match(code.strip()) if code else None
    if not match or not _known_language(match.group("lang").lower()):
        return None, f"Culture is not supported. '{code}' is an invalid culture identifier."
    parts = [match.group("lang").lower()]
    if match.group("script"):
        parts.append(match.group("script").title())
    if match.group("region"):
        parts.append(match.group("region").upper())
    return "-".join(parts), None


def system_culture():
    try:
        name = locale.getlocale()[0]
    except ValueError:
        name = None
    if not name:
        return FALLBACK_CULTURE
    culture, error = parse_culture(name.split(".")[0])
    return culture if error is None else FALLBACK_CULTURE


def ui_language(culture):
    """Message table serving `culture`: exact match, then same language, then English."""
    if culture in UI_LANGUAGES:
        return culture
    lang = (culture or "").split("-")[0]
    for candidate in UI_LANGUAGES:
        if candidate.split("-")[0] == lang:
            return candidate
    return FALLBACK_CULTURE


def display_name(culture, ui_culture):
    table = ui_language(ui_culture)
    parts = culture.split("-")
    language = LANGUAGE_NAMES[table].get(parts[0])
    if language is None:
        return culture
    region = REGION_NAMES[table].get(parts[-1]) if len(parts) > 1 else None
    if region is None:
        return language
    if table == "zh-CN":
        return f"{language}（{region}）"
    return f"{language} ({region})"
