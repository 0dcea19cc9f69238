class LogHorizonError(Exception):
    """Base class for loghorizon errors"""

    pass


class ExpressionError(LogHorizonError):
    """Modifier or target expression can not be evaluated"""

    pass


class TranslationMissing(LogHorizonError, KeyError):
    """Locale data does not contain the requested key"""

    def __init__(self, key: str, locale: str):
        super().__init__(key, locale)
        self.key = key
        self.locale = locale

    def __str__(self):
        return f"翻译缺失: {self.locale}.{self.key}"
