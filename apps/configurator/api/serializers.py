from django.conf import settings
from rest_framework import serializers

from apps.configurator.models import (
    Product,
    AttributeType,
    AttributeOption,
    Variant,
    VariantAttribute,
    CustomOption,
    CustomOptionChoice,
)


# =============================================================================
# Attribute Serializers
# =============================================================================

class AttributeOptionSerializer(serializers.ModelSerializer):
    display_value = serializers.CharField(source='get_display_value', read_only=True)

    class Meta:
        model = AttributeOption
        fields = [
            'id', 'value', 'display_value', 'color_hex', 'image_url',
            'is_out_of_stock', 'price_modifier', 'display_order'
        ]


class AttributeTypeSerializer(serializers.ModelSerializer):
    options = AttributeOptionSerializer(many=True, read_only=True)

    class Meta:
        model = AttributeType
        fields = [
            'id', 'name', 'slug', 'display_kind', 'is_required',
            'display_order', 'options'
        ]


# =============================================================================
# Custom Option Serializers
# =============================================================================

class CustomOptionChoiceSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomOptionChoice
        fields = ['id', 'label', 'value', 'price', 'display_order']


class CustomOptionSerializer(serializers.ModelSerializer):
    choices = CustomOptionChoiceSerializer(many=True, read_only=True)

    class Meta:
        model = CustomOption
        fields = [
            'id', 'name', 'kind', 'is_required', 'price_modifier',
            'placeholder', 'description', 'max_length', 'min_value',
            'max_value', 'display_order', 'choices'
        ]


# =============================================================================
# Variant Serializers
# =============================================================================

class VariantAttributeSerializer(serializers.ModelSerializer):
    attribute_type = serializers.CharField(
        source='attribute_option.attribute_type.name', read_only=True
    )
    value = serializers.CharField(
        source='attribute_option.value', read_only=True
    )
    display_value = serializers.CharField(
        source='attribute_option.get_display_value', read_only=True
    )
    color_hex = serializers.CharField(
        source='attribute_option.color_hex', read_only=True
    )

    class Meta:
        model = VariantAttribute
        fields = [
            'id', 'attribute_option', 'attribute_type',
            'value', 'display_value', 'color_hex'
        ]


class VariantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for variant lists."""
    product_name = serializers.CharField(source='product.name', read_only=True)
    attributes = serializers.SerializerMethodField()
    is_in_stock = serializers.BooleanField(read_only=True)
    is_low_stock = serializers.SerializerMethodField()

    class Meta:
        model = Variant
        fields = [
            'id', 'sku', 'name', 'product', 'product_name',
            'price_override', 'stock_quantity', 'is_active',
            'is_in_stock', 'is_low_stock', 'attributes'
        ]

    def get_attributes(self, obj):
        return obj.get_options_dict()

    def get_is_low_stock(self, obj):
        return obj.is_low_stock(settings.CONFIGURATOR['LOW_STOCK_THRESHOLD'])


class VariantDetailSerializer(VariantListSerializer):
    """Full variant serializer with attribute rows."""
    product_slug = serializers.CharField(source='product.slug', read_only=True)
    variant_attributes = VariantAttributeSerializer(
        source='variantattribute_set', many=True, read_only=True
    )

    class Meta(VariantListSerializer.Meta):
        fields = VariantListSerializer.Meta.fields + [
            'product_slug', 'variant_attributes', 'created_at', 'updated_at'
        ]


# =============================================================================
# Product Serializers
# =============================================================================

class ProductListSerializer(serializers.ModelSerializer):
    """Product list with counts."""
    variant_count = serializers.IntegerField(source='variant_total', read_only=True)
    active_variant_count = serializers.IntegerField(source='active_variant_total', read_only=True)
    is_configurable = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'base_price', 'is_active',
            'variant_count', 'active_variant_count', 'is_configurable'
        ]

    def get_is_configurable(self, obj):
        """True when the shopper has something to choose before buying."""
        return obj.has_attribute_types or obj.has_custom_options


class ProductDetailSerializer(serializers.ModelSerializer):
    """Full product detail with everything a configurator needs to render."""
    attribute_types = AttributeTypeSerializer(many=True, read_only=True)
    custom_options = CustomOptionSerializer(many=True, read_only=True)
    variants = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description', 'base_price', 'is_active',
            'attribute_types', 'custom_options', 'variants',
            'created_at', 'updated_at'
        ]

    def get_variants(self, obj):
        variants = [v for v in obj.variants.all() if v.is_active]
        return VariantListSerializer(variants, many=True, context=self.context).data


# =============================================================================
# Configuration Request Serializer
# =============================================================================

class ConfigurationRequestSerializer(serializers.Serializer):
    """
    Shopper input for configure/commit.

    Expected payload:
    {
        "attributes": {"Size": "M", "Color": "Blue"},
        "custom_answers": {"12": "ABC", "13": true},
        "quantity": 2
    }
    """
    attributes = serializers.DictField(
        child=serializers.CharField(allow_blank=True, allow_null=True),
        required=False,
        default=dict
    )
    custom_answers = serializers.DictField(
        required=False,
        default=dict
    )
    quantity = serializers.IntegerField(
        min_value=1,
        required=False,
        default=1
    )

    def validate_quantity(self, value):
        max_quantity = settings.CONFIGURATOR['MAX_QUANTITY']
        if value > max_quantity:
            raise serializers.ValidationError(
                f'Quantity must be at most {max_quantity}'
            )
        return value
