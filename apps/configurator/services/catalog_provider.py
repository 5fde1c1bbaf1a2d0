"""
Service that turns catalog rows into the engine's ProductCatalog.
Built catalogs are cached per product and dropped by signals when any
catalog row of that product changes.
"""

import logging

from django.conf import settings
from django.core.cache import cache
from django.db.models import Prefetch

from apps.configurator.engine import (
    ConcreteVariant,
    CustomOptionChoice,
    CustomOptionDefinition,
    DisplayKind,
    OptionKind,
    ProductCatalog,
    VariationGroup,
    VariationOption,
)
from apps.configurator.models import (
    AttributeOption,
    AttributeType,
    CustomOption,
    Product,
    Variant,
)


logger = logging.getLogger(__name__)

CACHE_KEY_TEMPLATE = 'configurator:catalog:{product_id}'


def configurator_setting(name):
    return settings.CONFIGURATOR[name]


class CatalogProvider:
    """
    Catalog provider for the configuration engine.
    Reads Product, AttributeType, Variant and CustomOption rows.
    """

    @staticmethod
    def cache_key(product_id) -> str:
        return CACHE_KEY_TEMPLATE.format(product_id=product_id)

    @staticmethod
    def build_catalog(product: Product) -> ProductCatalog:
        """
        Build the engine catalog for a product straight from the database.

        Only active variants take part in availability and matching.

        Raises:
            InvalidCatalogConfiguration: if stored rows break catalog invariants
        """
        attribute_types = AttributeType.objects.filter(
            product=product
        ).prefetch_related(
            Prefetch('options', queryset=AttributeOption.objects.order_by('display_order', 'value'))
        )

        variants = Variant.objects.filter(
            product=product,
            is_active=True
        ).prefetch_related(
            'variantattribute_set__attribute_option__attribute_type'
        )

        custom_options = CustomOption.objects.filter(
            product=product
        ).prefetch_related('choices')

        groups = [
            VariationGroup(
                id=str(attr_type.pk),
                name=attr_type.name,
                display_kind=DisplayKind(attr_type.display_kind),
                required=attr_type.is_required,
                values=tuple(
                    VariationOption(
                        value=opt.value,
                        label=opt.get_display_value(),
                        hex_color=opt.color_hex or None,
                        image_ref=opt.image_url or None,
                        explicitly_out_of_stock=opt.is_out_of_stock,
                        price_modifier=opt.price_modifier,
                    )
                    for opt in attr_type.options.all()
                ),
            )
            for attr_type in attribute_types
        ]

        concrete_variants = [
            ConcreteVariant(
                id=str(variant.pk),
                sku=variant.sku,
                name=variant.name,
                attributes=variant.get_options_dict(),
                stock_count=variant.stock_quantity,
                price_override=variant.price_override,
            )
            for variant in variants
        ]

        definitions = [
            CustomOptionDefinition(
                id=str(option.pk),
                name=option.name,
                kind=OptionKind(option.kind),
                required=option.is_required,
                price_modifier=option.price_modifier,
                choices=tuple(
                    CustomOptionChoice(
                        label=choice.label,
                        value=choice.value,
                        price=choice.price,
                    )
                    for choice in option.choices.all()
                ),
                min_value=option.min_value,
                max_value=option.max_value,
                max_length=option.max_length,
            )
            for option in custom_options
        ]

        return ProductCatalog(
            product_id=str(product.pk),
            base_price=product.base_price,
            groups=groups,
            variants=concrete_variants,
            custom_options=definitions,
        )

    @staticmethod
    def get_catalog(product: Product) -> ProductCatalog:
        """
        Cached build_catalog(). The availability index is rebuilt only when
        the product's catalog rows change.
        """
        key = CatalogProvider.cache_key(product.pk)
        catalog = cache.get(key)
        if catalog is None:
            logger.debug("Catalog cache miss for product %s", product.pk)
            catalog = CatalogProvider.build_catalog(product)
            cache.set(key, catalog, configurator_setting('CATALOG_CACHE_TIMEOUT'))
        return catalog

    @staticmethod
    def invalidate(product_id) -> None:
        if product_id is None:
            return
        cache.delete(CatalogProvider.cache_key(product_id))
