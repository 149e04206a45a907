"""
HTTP client for the textispell API.
"""

import httpx

BASE_URL = "http://localhost:8000/api"


def spellcheck(text: str, terse: bool = False, base_url: str = BASE_URL) -> list[list[dict]]:
    r = httpx.post(f"{base_url}/spellcheck", json={"text": text, "terse": terse}, timeout=60)
    r.raise_for_status()
    return r.json()["lines"]


def add_word(word: str, lowercase: bool = False, base_url: str = BASE_URL) -> dict:
    r = httpx.post(f"{base_url}/words", json={"word": word, "lowercase": lowercase})
    r.raise_for_status()
    return r.json()


def accept_word(word: str, base_url: str = BASE_URL) -> dict:
    r = httpx.post(f"{base_url}/words/accept", json={"word": word})
    r.raise_for_status()
    return r.json()


def save_dictionary(base_url: str = BASE_URL) -> dict:
    r = httpx.post(f"{base_url}/dictionary/save")
    r.raise_for_status()
    return r.json()
