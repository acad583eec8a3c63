from iex_client.query_string import QueryStringBuilder


def test_build_empty_returns_empty_string():
    assert QueryStringBuilder().build() == ""


def test_build_preserves_insertion_order():
    qsb = QueryStringBuilder()
    qsb.add("a", "1")
    qsb.add("b", "2")
    assert qsb.build() == "?a=1&b=2"


def test_duplicate_keys_are_kept_in_order():
    qsb = QueryStringBuilder().add("s", "x").add("t", "y").add("s", "z")
    assert qsb.build() == "?s=x&t=y&s=z"
    assert len(qsb) == 3


def test_build_is_idempotent():
    qsb = QueryStringBuilder().add("a", "1")
    assert qsb.build() == qsb.build() == "?a=1"


def test_values_are_percent_encoded():
    """
    Commas, spaces and reserved characters are escaped.
    """
    qsb = QueryStringBuilder()
    qsb.add("symbols", "AAPL,MSFT")
    qsb.add("q", "a b&c=d")
    assert qsb.build() == "?symbols=AAPL%2CMSFT&q=a%20b%26c%3Dd"


def test_canonical_has_no_question_mark():
    qsb = QueryStringBuilder().add("token", "pk_1")
    assert qsb.canonical() == "token=pk_1"
    assert QueryStringBuilder().canonical() == ""


def test_non_string_values_are_stringified():
    qsb = QueryStringBuilder().add("last", 5)
    assert qsb.build() == "?last=5"
    assert qsb.items() == [("last", "5")]


def test_bool_reflects_content():
    assert not QueryStringBuilder()
    assert QueryStringBuilder().add("a", "1")
