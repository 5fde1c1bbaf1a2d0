import itertools

import pytest

from apps.configurator.engine import match_variant
from apps.configurator.engine.matching import matching_variants, undecided_groups

from .factories import make_variant, shirt_variants


@pytest.mark.unit
class TestMatchVariant:
    def setup_method(self):
        self.variants = shirt_variants()
        self.required = ['Size', 'Color']

    def test_complete_selection_matches(self):
        matched = match_variant(self.variants, {'Size': 'S', 'Color': 'Blue'}, self.required)

        assert matched.id == 's-blue'

    def test_match_ignores_stock(self):
        matched = match_variant(self.variants, {'Size': 'S', 'Color': 'Red'}, self.required)

        assert matched.id == 's-red'
        assert matched.is_in_stock is False

    def test_partial_selection_returns_none(self):
        assert match_variant(self.variants, {'Size': 'S'}, self.required) is None

    def test_empty_selection_returns_none(self):
        assert match_variant(self.variants, {}, self.required) is None
        assert match_variant(self.variants, {}) is None

    def test_missing_combination_returns_none(self):
        assert match_variant(self.variants, {'Size': 'M', 'Color': 'Red'}, self.required) is None

    def test_blank_values_count_as_unselected(self):
        assert match_variant(self.variants, {'Size': 'S', 'Color': ''}, self.required) is None

    def test_ambiguous_selection_returns_none(self):
        variants = [
            make_variant('matte', stock=1, Size='S', Finish='Matte'),
            make_variant('gloss', stock=1, Size='S', Finish='Gloss'),
        ]

        assert match_variant(variants, {'Size': 'S'}, ['Size']) is None
        assert match_variant(variants, {'Size': 'S', 'Finish': 'Gloss'}, ['Size']).id == 'gloss'

    def test_result_is_always_none_or_a_single_table_entry(self):
        for size, color in itertools.product([None, 'S', 'M', 'X'], [None, 'Red', 'Blue']):
            selection = {k: v for k, v in (('Size', size), ('Color', color)) if v}
            matched = match_variant(self.variants, selection, self.required)

            if matched is not None:
                assert matched in self.variants
                assert all(matched.attributes[k] == v for k, v in selection.items())


@pytest.mark.unit
class TestUndecidedGroups:
    def test_names_groups_that_still_split_the_candidates(self):
        variants = [
            make_variant('s-matte', stock=1, Size='S', Finish='Matte', Fit='Slim'),
            make_variant('s-gloss', stock=1, Size='S', Finish='Gloss', Fit='Slim'),
            make_variant('m-gloss', stock=1, Size='M', Finish='Gloss', Fit='Slim'),
        ]

        candidates = matching_variants(variants, {'Size': 'S', 'Fit': ''})

        assert [v.id for v in candidates] == ['s-matte', 's-gloss']
        assert undecided_groups(candidates, {'Size': 'S'}) == ['Finish']
