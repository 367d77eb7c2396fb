from datetime import date

from nincheck import Category, Classifier, Identifier, Policy


def test_construction_never_validates():
    ident = Identifier("abc")
    assert not ident.is_valid()
    assert ident.label == "Unknown"
    assert ident.check().failed_step.startswith("CheckLength")


def test_f_number():
    ident = Identifier("01112835470")
    assert ident.is_valid()
    assert ident.is_category(Category.FNummer)
    assert not ident.is_category(Category.DNummer)
    assert ident.label == "FNummer"
    assert ident.birthdate == date(1928, 11, 1)
    assert ident.has_birthdate
    assert str(ident) == "01112835470"


def test_synthetic_number_follows_policy():
    ident = Identifier("31739556891")
    assert not ident.is_valid()
    assert ident.is_valid(production=False)
    relaxed = Identifier("31739556891", classifier=Classifier(policy=Policy(production=False)))
    assert relaxed.is_valid()
    assert relaxed.classification.test is Category.SyntPopTestNummer


def test_duf_number_has_no_birthdate():
    ident = Identifier("200112345609")
    assert ident.is_valid()
    assert ident.birthdate is None
    assert not ident.has_birthdate


def test_equality_by_value():
    assert Identifier("01112835470") == Identifier("01112835470")
    assert Identifier("01112835470") != Identifier("68126952442")
    assert hash(Identifier("01112835470")) == hash(Identifier("01112835470"))
