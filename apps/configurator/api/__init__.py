from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    AttributeTypeSerializer,
    AttributeOptionSerializer,
    CustomOptionSerializer,
    CustomOptionChoiceSerializer,
    VariantListSerializer,
    VariantDetailSerializer,
    ConfigurationRequestSerializer,
)

__all__ = [
    'ProductListSerializer',
    'ProductDetailSerializer',
    'AttributeTypeSerializer',
    'AttributeOptionSerializer',
    'CustomOptionSerializer',
    'CustomOptionChoiceSerializer',
    'VariantListSerializer',
    'VariantDetailSerializer',
    'ConfigurationRequestSerializer',
]
