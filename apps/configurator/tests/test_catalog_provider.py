from decimal import Decimal

import pytest
from django.core.cache import cache

from apps.configurator.engine import DisplayKind, InvalidCatalogConfiguration, OptionKind
from apps.configurator.models import AttributeOption, CustomOptionChoice, Product, Variant
from apps.configurator.services import CatalogProvider

from .factories import add_variant, create_configurable_product


@pytest.mark.django_db
class TestBuildCatalog:
    def test_groups_follow_display_order(self, product):
        catalog = CatalogProvider.build_catalog(product)

        assert catalog.product_id == str(product.pk)
        assert catalog.base_price == Decimal('100.00')
        assert [g.name for g in catalog.groups] == ['Tamanho', 'Cor']
        assert [o.value for o in catalog.get_group('Tamanho').values] == ['P', 'M']

        color = catalog.get_group('Cor')
        assert color.display_kind == DisplayKind.SWATCH
        assert [o.value for o in color.values] == ['Azul', 'Preto']
        assert color.get_option('Azul').hex_color == '#0000FF'

    def test_variants_are_keyed_by_group_name(self, product):
        row = Variant.objects.get(sku='camiseta-m-azul')

        variant = CatalogProvider.build_catalog(product).get_variant(str(row.pk))

        assert variant.attributes == {'Tamanho': 'M', 'Cor': 'Azul'}
        assert variant.stock_count == 2
        assert variant.price_override == Decimal('10.00')
        assert variant.sku == 'camiseta-m-azul'

    def test_inactive_variants_are_left_out(self, product):
        Variant.objects.filter(sku='camiseta-p-azul').update(is_active=False)

        catalog = CatalogProvider.build_catalog(product)

        assert sorted(v.sku for v in catalog.variants) == ['camiseta-m-azul', 'camiseta-p-preto']

    def test_custom_options(self, product):
        catalog = CatalogProvider.build_catalog(product)

        gift_wrap, monogram = catalog.custom_options
        assert gift_wrap.name == 'Embrulho'
        assert gift_wrap.kind == OptionKind.CHECKBOX
        assert gift_wrap.choices[0].price == Decimal('7.50')
        assert monogram.kind == OptionKind.TEXT
        assert monogram.max_length == 3
        assert monogram.price_modifier == Decimal('15.00')

    def test_duplicate_combination_is_rejected(self, product):
        p = AttributeOption.objects.get(attribute_type__product=product, value='P')
        azul = AttributeOption.objects.get(attribute_type__product=product, value='Azul')
        add_variant(product, 'camiseta-p-azul-2', [p, azul], stock=1)

        with pytest.raises(InvalidCatalogConfiguration) as exc_info:
            CatalogProvider.build_catalog(product)

        assert 'share the same attribute combination' in exc_info.value.problems[0]

    def test_product_without_configuration(self, db):
        product = Product.objects.create(name='Vale-presente', base_price=Decimal('50.00'))

        catalog = CatalogProvider.build_catalog(product)

        assert catalog.groups == ()
        assert catalog.variants == ()
        assert catalog.custom_options == ()


@pytest.mark.django_db
class TestCatalogCache:
    def test_catalog_is_cached(self, product, django_assert_num_queries):
        first = CatalogProvider.get_catalog(product)

        assert cache.get(CatalogProvider.cache_key(product.pk)) is not None
        with django_assert_num_queries(0):
            second = CatalogProvider.get_catalog(product)
        assert second.product_id == first.product_id

    def test_stock_change_invalidates(self, product):
        CatalogProvider.get_catalog(product)

        row = Variant.objects.get(sku='camiseta-m-azul')
        row.stock_quantity = 0
        row.save()

        assert cache.get(CatalogProvider.cache_key(product.pk)) is None
        variant = CatalogProvider.get_catalog(product).get_variant(str(row.pk))
        assert variant.stock_count == 0

    def test_option_change_invalidates(self, product):
        CatalogProvider.get_catalog(product)

        option = AttributeOption.objects.get(attribute_type__product=product, value='Preto')
        option.is_out_of_stock = True
        option.save()

        assert cache.get(CatalogProvider.cache_key(product.pk)) is None

    def test_choice_change_invalidates(self, product):
        CatalogProvider.get_catalog(product)

        choice = CustomOptionChoice.objects.get(custom_option__product=product)
        choice.price = Decimal('9.00')
        choice.save()

        assert cache.get(CatalogProvider.cache_key(product.pk)) is None

    def test_other_products_stay_cached(self, product):
        other = create_configurable_product(slug='regata')
        CatalogProvider.get_catalog(product)
        CatalogProvider.get_catalog(other)

        Variant.objects.filter(product=other).first().save()

        assert cache.get(CatalogProvider.cache_key(product.pk)) is not None
        assert cache.get(CatalogProvider.cache_key(other.pk)) is None

    def test_delete_invalidates(self, product):
        CatalogProvider.get_catalog(product)

        Variant.objects.get(sku='camiseta-p-preto').delete()

        assert cache.get(CatalogProvider.cache_key(product.pk)) is None
