# bytes_lit/__about__.py

APP_NAME        = "bytes-lit"
APP_TITLE       = "Integer Literal ⇆ Big-Endian Bytes"   # long name
AUTHOR          = "bytes-lit contributors"
COPYRIGHT_YEAR  = "2026"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"
HOMEPAGE        = "https://github.com/bytes-lit/bytes-lit"


__version__ = "0.1.0.dev1"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT", "HOMEPAGE",
    "about_text",
]

def about_text() -> str:
    return (
        f"{APP_TITLE}\n"
        f"Version {__version__}\n"
        f"{COPYRIGHT}\n"
        f"{HOMEPAGE}"
    )
