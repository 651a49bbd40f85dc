"""Screen-specific constants."""

from fitview.constants.screens.model_fits import (
    COUNT_LABEL_TEMPLATE,
    MODEL_FITS_TITLE,
    SEARCH_PLACEHOLDER,
    STATUS_EMPTY,
    STATUS_ERROR,
    STATUS_LOADING,
    STATUS_NO_MATCHES,
)

__all__ = [
    "COUNT_LABEL_TEMPLATE",
    "MODEL_FITS_TITLE",
    "SEARCH_PLACEHOLDER",
    "STATUS_EMPTY",
    "STATUS_ERROR",
    "STATUS_LOADING",
    "STATUS_NO_MATCHES",
]
