from urllib.parse import quote


def percent_encode(text: str) -> str:
    return quote(text, safe="", encoding="utf-8", errors="strict")
