class ENDPOINTS:
    def __init__(self, api_prefix: str = "api"):
        self.api_prefix = f"/{api_prefix}"

    # Endpoint patterns as class attributes
    TRANSLATE = "/translate"
    TRANSLATE_LOCALES = "/translate/locales"

    def build_url(self, pattern: str, **kwargs) -> str:
        """Builds a URL from a pattern and keyword arguments to replace placeholders."""
        return f"{self.api_prefix}{pattern.format(**kwargs)}"

    def translate(self) -> str:
        return self.build_url(self.TRANSLATE)

    def translate_locales(self) -> str:
        return self.build_url(self.TRANSLATE_LOCALES)
