import pickle
from decimal import Decimal

import pytest

from apps.configurator.engine import (
    InvalidCatalogConfiguration,
    ProductCatalog,
    SelectionSession,
)

from .factories import (
    make_group,
    make_variant,
    monogram_option,
    shirt_catalog,
    shirt_groups,
)


@pytest.mark.unit
class TestProductCatalog:
    def test_valid_catalog(self):
        catalog = shirt_catalog()

        assert catalog.required_group_names == ['Size', 'Color']
        assert catalog.has_variants is True
        assert catalog.get_group('Color').name == 'Color'
        assert catalog.get_group('Material') is None
        assert catalog.get_variant('s-blue').stock_count == 5
        assert repr(catalog) == '<ProductCatalog shirt: 2 groups, 2 variants, 0 custom options>'

    def test_duplicate_combination_raises(self):
        variants = [
            make_variant('a', stock=1, Size='S', Color='Red'),
            make_variant('b', stock=3, Size='S', Color='Red'),
        ]

        with pytest.raises(InvalidCatalogConfiguration) as exc_info:
            shirt_catalog(variants=variants)

        assert 'share the same attribute combination' in exc_info.value.problems[0]

    def test_session_construction_rejects_duplicate_combination(self):
        variants = [
            make_variant('a', stock=1, Size='S', Color='Red'),
            make_variant('b', stock=3, Size='S', Color='Red'),
        ]

        with pytest.raises(InvalidCatalogConfiguration):
            SelectionSession.for_product('shirt', Decimal('10'), shirt_groups(), variants)

    def test_unknown_group_and_value(self):
        variants = [
            make_variant('a', stock=1, Size='S', Color='Green'),
            make_variant('b', stock=1, Size='M', Color='Red', Material='Silk'),
        ]

        with pytest.raises(InvalidCatalogConfiguration) as exc_info:
            shirt_catalog(variants=variants)

        problems = exc_info.value.problems
        assert 'Variant a references unknown value Green of group Color' in problems
        assert 'Variant b references unknown group Material' in problems

    def test_variant_missing_required_group(self):
        with pytest.raises(InvalidCatalogConfiguration) as exc_info:
            shirt_catalog(variants=[make_variant('a', stock=1, Size='S')])

        assert exc_info.value.problems == ['Variant a has no value for required group Color']

    def test_optional_group_may_be_absent_from_variants(self):
        groups = [make_group('Size', ['S']), make_group('Finish', ['Matte'], required=False)]

        catalog = ProductCatalog('mug', Decimal('5'), groups, [make_variant('a', stock=1, Size='S')])

        assert catalog.required_group_names == ['Size']

    def test_negative_stock(self):
        with pytest.raises(InvalidCatalogConfiguration):
            shirt_catalog(variants=[make_variant('a', stock=-1, Size='S', Color='Red')])

    def test_negative_base_price(self):
        with pytest.raises(InvalidCatalogConfiguration):
            shirt_catalog(base_price='-1')

    def test_duplicate_group_and_option(self):
        groups = [make_group('Size', ['S', 'S']), make_group('Size', ['M'])]

        with pytest.raises(InvalidCatalogConfiguration) as exc_info:
            ProductCatalog('shirt', Decimal('1'), groups)

        assert exc_info.value.problems == [
            'Duplicate option value in group Size',
            'Duplicate variation group: Size',
        ]

    def test_negative_custom_modifier(self):
        with pytest.raises(InvalidCatalogConfiguration):
            shirt_catalog(custom_options=[monogram_option(price_modifier='-10')])

    def test_all_problems_reported_together(self):
        variants = [make_variant('a', stock=-2, Size='S')]

        with pytest.raises(InvalidCatalogConfiguration) as exc_info:
            shirt_catalog(base_price='-1', variants=variants)

        assert len(exc_info.value.problems) == 3

    def test_catalog_survives_pickling(self):
        catalog = shirt_catalog(custom_options=[monogram_option()])

        restored = pickle.loads(pickle.dumps(catalog))

        assert restored.product_id == 'shirt'
        assert restored.availability.is_available({}, 'Size', 'S') is True
