import requests

TIMEOUT = 10
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/115.0 Safari/537.36"
)


def fetch_html(url: str, timeout: float = TIMEOUT, headers: dict | None = None) -> str:
    """Скачивает страницу со списком; любые ошибки пробрасываются наверх."""
    if headers is None:
        headers = {"User-Agent": USER_AGENT}
    resp = requests.get(url, headers=headers, timeout=timeout)
    resp.raise_for_status()
    return resp.text
