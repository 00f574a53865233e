from mockbanker.formats import DisplayRules, PLAIN


def test_every() -> None:
    assert DisplayRules(every=4).render("DE89370400440532013000") == "DE89 3704 0044 0532 0130 00"


def test_groups_with_tail() -> None:
    rules = DisplayRules(groups=(4, 6, 5))
    assert rules.render("378282246310005") == "3782 822463 10005"
    assert rules.render("3782822463100051") == "3782 822463 10005 1"


def test_template() -> None:
    rules = DisplayRules(template="###-##-####")
    assert rules.render("123456789") == "123-45-6789"
    # a raw value of the wrong size is returned untouched
    assert rules.render("12345678") == "12345678"
    assert rules.separators == frozenset("-")


def test_plain() -> None:
    assert PLAIN.render("ABC") == "ABC"
    assert PLAIN.separators == frozenset()
