"""Reference product data."""

from .products import (
    BOARD_PRODUCTS,
    DEFAULT_MULTIWEAR_KEY,
    MULTIWEAR_PRODUCTS,
    BoardProduct,
    Category,
    MultiwearProduct,
    get_multiwear_product,
    resolve_board_title,
)

__all__ = [
    "BOARD_PRODUCTS",
    "BoardProduct",
    "Category",
    "DEFAULT_MULTIWEAR_KEY",
    "MULTIWEAR_PRODUCTS",
    "MultiwearProduct",
    "get_multiwear_product",
    "resolve_board_title",
]
