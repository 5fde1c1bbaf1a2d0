"""
Catalog models backing the product configurator.

Model Hierarchy:
- Product: Base product with a base price (e.g., "Camiseta Básica")
- AttributeType: Variation axes of a product (Size, Color)
- AttributeOption: Values for each attribute type (P, M, G / Azul, Branco)
- Variant: Individual SKU with stock and an optional price override
- CustomOption: Per-order customizations (monogram, gift wrap)
- CustomOptionChoice: Priced answers of select/checkbox custom options
"""

from .product import Product
from .attribute import AttributeType, AttributeOption
from .variant import Variant, VariantAttribute
from .custom_option import CustomOption, CustomOptionChoice

__all__ = [
    'Product',
    'AttributeType',
    'AttributeOption',
    'Variant',
    'VariantAttribute',
    'CustomOption',
    'CustomOptionChoice',
]
