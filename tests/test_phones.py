from datetime import date

import pytest

from apps.clients.domain.entities import ClientEntity
from apps.clients.domain.phones import (
    apply_legacy_phone,
    clamp_primary_index,
    is_valid_phone_number,
    merge_phone_numbers,
)


class TestPhoneValidation:
    @pytest.mark.parametrize('number', ['+48 600 100 200', '(12) 345-67-89', '0123456789'])
    def test_valid(self, number):
        assert is_valid_phone_number(number)

    @pytest.mark.parametrize('number', ['12345', '+48 600 abc 200', ''])
    def test_invalid(self, number):
        assert not is_valid_phone_number(number)


class TestMergePhoneNumbers:
    def test_legacy_goes_first(self):
        assert merge_phone_numbers(['+48 600 100 300'], '+48 600 100 200') == ['+48 600 100 200', '+48 600 100 300']

    def test_duplicates_and_blanks_dropped(self):
        merged = merge_phone_numbers(['+48 600 100 300', ' ', '+48 600 100 300'], '+48 600 100 300')
        assert merged == ['+48 600 100 300']

    def test_empty(self):
        assert merge_phone_numbers(None) == []


class TestPrimaryIndex:
    def test_clamped_into_range(self):
        assert clamp_primary_index(5, 2) == 1
        assert clamp_primary_index(-3, 2) == 0
        assert clamp_primary_index('1', 3) == 1

    def test_garbage_becomes_zero(self):
        assert clamp_primary_index(None, 3) == 0
        assert clamp_primary_index('x', 3) == 0

    def test_empty_list(self):
        assert clamp_primary_index(2, 0) == 0


class TestApplyLegacyPhone:
    def test_existing_number_becomes_primary(self):
        numbers, index = apply_legacy_phone(['+48 600 100 300', '+48 600 100 200'], '+48 600 100 200')
        assert numbers == ['+48 600 100 300', '+48 600 100 200']
        assert index == 1

    def test_new_number_prepended(self):
        numbers, index = apply_legacy_phone(['+48 600 100 300'], '+48 600 100 400')
        assert numbers == ['+48 600 100 400', '+48 600 100 300']
        assert index == 0


class TestClientPrimaryPhone:
    def make(self, numbers, index):
        return ClientEntity(
            id=1, business_name='Cafe Roma', manager_name='Anna', place='Krakow',
            first_visit=date(2024, 1, 1), next_visit=date(2024, 1, 10),
            phone_numbers=numbers, primary_phone_index=index
        )

    def test_index_past_end_falls_back_to_last(self):
        assert self.make(['+48 600 100 300', '+48 600 100 400'], 5).primary_phone == '+48 600 100 400'

    def test_no_numbers(self):
        assert self.make([], 3).primary_phone is None
