import itertools

import pytest

from apps.configurator.engine import AvailabilityIndex, is_available

from .factories import make_group, make_variant, shirt_groups, shirt_variants


@pytest.mark.unit
class TestIsAvailable:
    def setup_method(self):
        self.variants = shirt_variants()

    def test_sold_out_combination_blocks_size(self):
        # The only S/Red is out of stock
        assert is_available(self.variants, {'Color': 'Red'}, 'Size', 'S') is False

    def test_in_stock_combination_allows_size(self):
        assert is_available(self.variants, {'Color': 'Blue'}, 'Size', 'S') is True

    def test_color_follows_selected_size(self):
        assert is_available(self.variants, {'Size': 'S'}, 'Color', 'Red') is False
        assert is_available(self.variants, {'Size': 'S'}, 'Color', 'Blue') is True

    def test_value_without_variants_is_unavailable(self):
        assert is_available(self.variants, {}, 'Size', 'M') is False

    def test_empty_selection_values_are_wildcards(self):
        assert is_available(self.variants, {'Color': ''}, 'Size', 'S') is True
        assert is_available(self.variants, {'Color': None}, 'Size', 'S') is True

    def test_no_variant_table_means_available(self):
        assert is_available([], {}, 'Size', 'M') is True

    def test_explicit_out_of_stock_wins(self):
        group = make_group('Size', ['S', 'M'], out_of_stock=['S'])
        flagged = group.get_option('S')

        assert is_available(self.variants, {}, 'Size', 'S', flagged) is False
        assert is_available([], {}, 'Size', 'S', flagged) is False

    def test_unflagged_option_checks_the_table(self):
        option = make_group('Size', ['S']).get_option('S')

        assert is_available(self.variants, {}, 'Size', 'S', option) is True

    def test_unknown_group_in_selection_blocks_everything(self):
        assert is_available(self.variants, {'Material': 'Silk'}, 'Size', 'S') is False


@pytest.mark.unit
class TestAvailabilityIndex:
    def setup_method(self):
        self.groups = shirt_groups()
        self.variants = [
            make_variant('s-red', stock=0, Size='S', Color='Red'),
            make_variant('s-blue', stock=5, Size='S', Color='Blue'),
            make_variant('m-blue', stock=2, Size='M', Color='Blue'),
        ]
        self.index = AvailabilityIndex(self.variants)

    def test_matches_one_off_function(self):
        selections = [{}, {'Size': 'S'}, {'Color': 'Blue'}, {'Size': 'M', 'Color': 'Red'}]
        for selection in selections:
            for group in self.groups:
                for option in group.values:
                    assert self.index.is_available(
                        selection, group.name, option.value
                    ) == is_available(self.variants, selection, group.name, option.value)

    def test_availability_by_option_covers_every_option(self):
        availability = self.index.availability_by_option(self.groups, {})

        assert availability == {
            'Size': {'S': True, 'M': True, 'L': False},
            'Color': {'Red': False, 'Blue': True},
        }

    def test_can_switch_value_of_selected_group(self):
        availability = self.index.availability_by_option(
            self.groups, {'Size': 'S', 'Color': 'Blue'}
        )

        assert availability['Size']['M'] is True
        assert availability['Size']['L'] is False

    def test_adding_constraints_never_restores_availability(self):
        """Anything unavailable for a selection stays unavailable for every extension of it."""
        selections = [
            {k: v for k, v in (('Size', size), ('Color', color)) if v}
            for size, color in itertools.product([None, 'S', 'M', 'L'], [None, 'Red', 'Blue'])
        ]

        for base, extended in itertools.product(selections, selections):
            if not base.items() <= extended.items():
                continue
            for group in self.groups:
                for option in group.values:
                    if self.index.is_available(base, group.name, option.value):
                        continue
                    assert not self.index.is_available(
                        extended, group.name, option.value
                    ), (base, extended, group.name, option.value)

    def test_empty_table_reports_everything_available(self):
        index = AvailabilityIndex([])
        groups = [make_group('Size', ['S', 'M'], out_of_stock=['M'])]

        assert index.availability_by_option(groups, {}) == {'Size': {'S': True, 'M': False}}
