"""
Tests for the category classifier.

Numbers come from the registry examples used throughout the project; H numbers
and a few edge cases were built with ``compute_check_digits``.
"""

from datetime import date

import pytest

from nincheck.config import Policy
from nincheck.engine.categories import Category
from nincheck.engine.classifier import (
    PRODUCTION_REJECTION,
    Classification,
    Classifier,
    Outcome,
    compose_label,
)

VALID = {
    Category.FNummer: ["17054026641", "22095314442", "17028338791", "18081388020", "01112835470", "01032078210", "01104343909"],
    Category.DNummer: ["51106297510", "45092528433", "68126952442", "70090678378", "67016464373", "45458012354"],
    Category.HNummer: ["17454026624", "17428338774", "01512835453", "01451812374", "16491234583"],
    Category.FHNummer: ["81212121223", "94545456561", "80000000098", "99999999928"],
    Category.DufNummer: ["200112345609", "201017238203", "200816832910"],
    Category.TenorTestNummer: ["03923248608", "28894698995", "41818012320"],
    Category.SyntPopTestNummer: ["44722264549", "31739556891", "15708512300"],
}

INVALID = {
    Category.FNummer: ["97054026641", "z7054026641", "18081388093", "01112835480", "01032078270", "11111111100"],
    Category.DNummer: ["91106297510", "21106297510", "45992528433", "z1106297510"],
    Category.HNummer: ["97454026641", "18981388020", "18181388020", "98481388020", "z7454026641", "17454026625"],
    Category.FHNummer: ["71212121229", "", "1898z388020", "79999999986"],
    Category.DufNummer: ["71212121229", "", "1898z388020", "123411234560", "037422972082"],
    Category.TenorTestNummer: ["31739556891"],
    Category.SyntPopTestNummer: ["28894698995"],
}


@pytest.fixture
def classifier():
    return Classifier(today=date(2026, 10, 19))


class TestCategoryChecks:
    """One hypothesis at a time."""

    def test_valid_numbers(self, classifier):
        for category, numbers in VALID.items():
            for nin in numbers:
                outcome = classifier.check(nin, category)
                assert outcome.is_valid, f"{nin} as {category}: {outcome.failed_step}"
                assert outcome.category is category
                assert outcome.failed_step == ""

    def test_invalid_numbers(self, classifier):
        for category, numbers in INVALID.items():
            for nin in numbers:
                outcome = classifier.check(nin, category)
                assert not outcome.is_valid, f"{nin} should not be {category}"
                assert outcome.failed_step

    def test_fh_series_bounds(self, classifier):
        assert classifier.check("80000000098", Category.FHNummer)
        assert classifier.check("99999999928", Category.FHNummer)
        outcome = classifier.check("79999999986", Category.FHNummer)
        assert outcome.failed_step == "Ikke riktig tallserie"

    def test_duf_needs_twelve_digits(self, classifier):
        outcome = classifier.check("01112835470", Category.DufNummer)
        assert outcome.failed_step == "CheckLength: Got 11, expected 12"

    def test_f_and_d_are_exclusive(self, classifier):
        for numbers in VALID.values():
            for nin in numbers:
                f = classifier.check(nin, Category.FNummer).is_valid
                d = classifier.check(nin, Category.DNummer).is_valid
                assert not (f and d), nin

    def test_d_number_with_h_shifted_month(self, classifier):
        """Day and month both shifted by 40: a D number that also passes as H."""
        nin = "45458012354"
        assert classifier.check(nin, Category.DNummer)
        assert classifier.check(nin, Category.HNummer)
        assert not classifier.check(nin, Category.FNummer)
        assert classifier.classify(nin).base is Category.DNummer
        assert classifier.validate(nin) == Outcome(True, Category.DNummer)
        assert classifier.birthdate(nin) == date(1980, 5, 5)

    def test_checksum_is_the_last_step(self, classifier):
        for category in (Category.FNummer, Category.DNummer, Category.HNummer, Category.FHNummer):
            for nin in VALID[category]:
                mutated = nin[:10] + str((int(nin[10]) + 1) % 10)
                outcome = classifier.check(mutated, category)
                assert not outcome.is_valid
                assert outcome.failed_step.startswith("CheckDigits"), outcome.failed_step

    def test_unknown_category_has_no_checks(self, classifier):
        outcome = classifier.check("01112835470", Category.Unknown)
        assert not outcome.is_valid
        assert outcome == Outcome(False, Category.Unknown, "No checks defined for Unknown")

    def test_outcome_is_truthy_when_valid(self):
        assert Outcome(True, Category.FNummer)
        assert not Outcome(False, Category.Unknown, "x")


class TestClassify:
    @pytest.mark.parametrize(
        "nin, expected",
        [
            ("55076500565", "Unknown"),
            ("12345678901", "Unknown"),
            ("01112835470", "FNummer"),
            ("200112345609", "DufNummer"),
            ("81212121223", "FHNummer"),
            ("17454026624", "HNummer"),
            ("28894698995", "TenorTestNummer,FNummer"),
            ("68126952442", "DNummer"),
            ("31739556891", "SyntPopTestNummer,FNummer"),
            ("44722264549", "SyntPopTestNummer,DNummer"),
            ("41818012320", "TenorTestNummer,DNummer"),
            ("45458012354", "DNummer"),
            ("01451812374", "HNummer"),
        ],
    )
    def test_labels(self, classifier, nin, expected):
        assert classifier.classify(nin).label == expected

    def test_base_and_test_fields(self, classifier):
        result = classifier.classify("28894698995")
        assert result == Classification(
            label="TenorTestNummer,FNummer",
            base=Category.FNummer,
            test=Category.TenorTestNummer,
        )

    def test_unknown_reports_most_telling_failure(self, classifier):
        assert classifier.classify("12345678901").failed_step == "CheckMonth: 34 is not a valid month"
        assert classifier.classify("037422972082").failed_step == "Ikke sannsynlig årstall: 0374"

    def test_bad_shape_is_unknown(self, classifier):
        for value in (None, "", "abc", "1" * 13):
            result = classifier.classify(value)
            assert result.label == "Unknown"
            assert result.failed_step.startswith("CheckLength")
        assert classifier.classify("0111283547a").failed_step.startswith("CheckCharacters")


class TestComposeLabel:
    def test_all_combinations(self):
        assert compose_label(None, None) == "Unknown"
        assert compose_label(Category.DNummer, None) == "DNummer"
        assert compose_label(Category.FNummer, Category.TenorTestNummer) == "TenorTestNummer,FNummer"
        assert (
            compose_label(None, Category.SyntPopTestNummer)
            == "Illegal test number, SyntPopTestNummer only"
        )


class TestValidate:
    VALID_IN_TEST = [
        "200112345609", "68126952442", "70090678378", "67016464373",
        "31739556891", "28894698995", "01112835470", "01032078210", "01104343909",
    ]
    INVALID_IN_TEST = [
        "130112345609", "68156952442", "90090678378", "67016464376",
        "32739556891", "28894698965", "00112835470", "01352078210", "01104310009",
    ]

    def test_valid_outside_production(self, classifier):
        for nin in self.VALID_IN_TEST:
            outcome = classifier.validate(nin, production=False)
            assert outcome.is_valid, f"{nin}: {outcome.failed_step}"

    def test_invalid_outside_production(self, classifier):
        for nin in self.INVALID_IN_TEST:
            outcome = classifier.validate(nin, production=False)
            assert not outcome.is_valid, nin
            assert outcome.category is Category.Unknown
            assert outcome.failed_step

    def test_production_rejects_synthetic_numbers(self, classifier):
        for nin, category in (("31739556891", Category.SyntPopTestNummer), ("28894698995", Category.TenorTestNummer)):
            outcome = classifier.validate(nin, production=True)
            assert outcome == Outcome(False, category, PRODUCTION_REJECTION)

    def test_production_accepts_registry_numbers(self, classifier):
        for nin in set(self.VALID_IN_TEST) - {"31739556891", "28894698995"}:
            assert classifier.validate(nin, production=True), nin

    def test_all_base_categories_accepted(self, classifier):
        for category in (Category.FNummer, Category.DNummer, Category.HNummer, Category.FHNummer, Category.DufNummer):
            for nin in VALID[category]:
                outcome = classifier.validate(nin, production=True)
                assert outcome == Outcome(True, category)

    def test_production_default_comes_from_policy(self):
        strict = Classifier(policy=Policy(production=True))
        relaxed = Classifier(policy=Policy(production=False))
        assert not strict.validate("31739556891")
        assert relaxed.validate("31739556891")

    def test_duf_year_reason(self, classifier):
        outcome = classifier.validate("037422972082")
        assert outcome.failed_step == "Ikke sannsynlig årstall: 0374"

    def test_strict_calendar_policy(self):
        lenient = Classifier(today=date(2026, 10, 19))
        strict = Classifier(policy=Policy(strict_calendar=True), today=date(2026, 10, 19))
        assert lenient.validate("29020012380")
        outcome = strict.validate("29020012380")
        assert not outcome.is_valid
        assert outcome.failed_step == "CheckDate: 1900-02-29 is not a calendar date"

    def test_reference_date(self):
        assert not Classifier(today=date(2026, 10, 19)).validate("01014050066")
        assert Classifier(today=date(2040, 1, 1)).validate("01014050066")


class TestBirthdate:
    def test_categories_with_a_birthdate(self, classifier):
        assert classifier.birthdate("01112835470") == date(1928, 11, 1)
        assert classifier.birthdate("68126952442") == date(1869, 12, 28)
        assert classifier.birthdate("17454026624") == date(1940, 5, 17)
        assert classifier.birthdate("28894698995") == date(1946, 9, 28)
        assert classifier.birthdate("07020554821") == date(2005, 2, 7)

    def test_no_birthdate(self, classifier):
        for nin in ("200112345609", "81212121223", "01112835480", "", None, "garbage"):
            assert classifier.birthdate(nin) is None

    def test_decoded_fields(self, classifier):
        decoded = classifier.decode_birth("68126952442")
        assert decoded.day_offset == 40
        assert decoded.sequence == 524
