"""
Common Error Constants

Centralized error messages shared by routers and services.
"""

# Catalog errors
ERROR_CATEGORY_NOT_FOUND = "Category not found"
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CATEGORY_FETCH_FAILED = "Failed to fetch categories"
ERROR_PRODUCT_FETCH_FAILED = "Failed to fetch products"
ERROR_CATEGORY_SAVE_FAILED = "Failed to save category"
ERROR_PRODUCT_SAVE_FAILED = "Failed to save product"

# Cart errors
ERROR_CART_EMPTY = "Your cart is empty. Please add items to proceed."

# Auth errors
ERROR_ADMIN_REQUIRED = "Admin access required"
ERROR_ADMIN_KEY_MISSING = "ADMIN_API_KEY not configured"


class CartEmptyError(ValueError):
    """Raised when checkout is attempted on a cart without line items."""

    def __init__(self, message: str = ERROR_CART_EMPTY):
        super().__init__(message)
