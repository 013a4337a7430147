class UnknownCurrencyError(Exception):
    def __init__(self, code: str):
        self.code = code
        self.message = f"Unsupported currency: {code}"
        super().__init__(self.message)


class UnknownGuestFieldError(Exception):
    def __init__(self, field: str):
        self.field = field
        self.message = f"Unknown guest field: {field}"
        super().__init__(self.message)


class UnknownSortKeyError(Exception):
    def __init__(self, key: str):
        self.key = key
        self.message = f"Unknown sort key: {key}"
        super().__init__(self.message)


class PageNotFoundError(Exception):
    def __init__(self, path: str):
        self.path = path
        self.message = f"Page not found: {path}"
        super().__init__(self.message)
