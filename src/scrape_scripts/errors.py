"""Exceptions raised by the scrape_scripts pipeline."""


class MalformedLineError(ValueError):
    """Input line does not have exactly three comma-separated fields."""


class ScrapeError(Exception):
    """Fetching or extracting a script failed."""


class TransportError(ScrapeError):
    pass


class UnexpectedStatusError(ScrapeError):
    def __init__(self, status_code: int):
        super().__init__(f"unexpected status code {status_code}")
        self.status_code = status_code


class ParseError(ScrapeError):
    pass


class UnexpectedMatchCountError(ScrapeError):
    def __init__(self, count: int):
        super().__init__(f"expected 1 node when scraping script, found {count}")
        self.count = count


class PersistenceError(Exception):
    """Creating or writing an artifact failed.

    category is one of "file txt open", "file txt write", "file meta open",
    "file meta write".
    """

    def __init__(self, category: str, message: str):
        super().__init__(f"{category}:{message}")
        self.category = category
        self.message = message
