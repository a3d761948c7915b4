"""
Exceptions raised by the i18n package.
"""


class ConfigurationError(Exception):
    """
    Raised when a locale, grammar or translation table is set up wrongly.

    These are programming or packaging defects (a locale without a variant
    grammar, a variant list of the wrong size, an unknown locale code) and
    are never recovered from at translation time.
    """
