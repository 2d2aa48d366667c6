import pytest
from pydantic import TypeAdapter, ValidationError

from seqparse.exceptions import ParseError
from seqparse.models import (
    DetectionFailed,
    FastaParsed,
    FastaRecord,
    Feature,
    Flag,
    GenBankDocument,
    GenBankParsed,
    Multi,
    ParseFailed,
    ParseOutcome,
    Scalar,
)


def test_fasta_record_length_is_derived():
    record = FastaRecord(header="x", sequence="AC GT\nAA")
    assert record.sequence == "ACGTAA"
    assert record.length == 6


def test_fasta_record_length_cannot_be_set():
    record = FastaRecord(header="x", sequence="ACGT", length=99)
    assert record.length == 4
    with pytest.raises(ValidationError):
        record.sequence = "A"


def test_fasta_record_dump_includes_length():
    assert FastaRecord(header="x", sequence="AC").model_dump() == {
        "header": "x", "sequence": "AC", "length": 2,
    }


def test_flag_promotion():
    assert Flag().add(Scalar(value="a")) == Multi(values=["", "a"])
    assert Flag().extend("text") == Scalar(value="text")


def test_scalar_promotion_and_extension():
    assert Scalar(value="a").add(Scalar(value="b")) == Multi(values=["a", "b"])
    assert Scalar(value="a").extend("b") == Scalar(value="a b")
    assert Scalar(value="").extend("b") == Scalar(value="b")


def test_multi_growth_and_extension():
    multi = Multi(values=["a", "b"])
    assert multi.add(Scalar(value="c")) == Multi(values=["a", "b", "c"])
    assert multi.extend("more") == Multi(values=["a", "b more"])
    assert multi == Multi(values=["a", "b"])
    assert Multi().extend("x") == Multi(values=["x"])


def test_display_and_python_values():
    assert Flag().display() == "true"
    assert Scalar(value="abc").display() == "abc"
    assert Multi(values=["a", "b"]).display() == "a; b"
    assert Flag().as_python() is True
    assert Multi(values=["a"]).as_python() == ["a"]


def test_feature_get():
    feature = Feature(
        key="CDS",
        location="1..9",
        qualifiers={"gene": Scalar(value="dnaA"), "pseudo": Flag()},
    )
    assert feature.get("gene") == "dnaA"
    assert feature.get("pseudo") is True
    assert feature.get("missing") is None


def test_qualifier_union_from_json():
    feature = Feature.model_validate({
        "key": "CDS",
        "location": "1..9",
        "qualifiers": {
            "a": {"kind": "flag"},
            "b": {"kind": "scalar", "value": "x"},
            "c": {"kind": "multi", "values": ["y", "z"]},
        },
    })
    assert feature.qualifiers == {"a": Flag(), "b": Scalar(value="x"), "c": Multi(values=["y", "z"])}


def test_outcome_kinds_are_distinguishable():
    adapter = TypeAdapter(ParseOutcome)
    outcomes = [
        FastaParsed(records=[FastaRecord(header="a", sequence="AC")]),
        GenBankParsed(document=GenBankDocument(locus="LOCUS x")),
        DetectionFailed(),
        ParseFailed(reason="boom"),
    ]
    for outcome in outcomes:
        assert adapter.validate_json(outcome.model_dump_json()) == outcome
    assert [o.ok for o in outcomes] == [True, True, False, False]


def test_unwrap():
    document = GenBankDocument()
    assert GenBankParsed(document=document).unwrap() == document
    assert FastaParsed().unwrap() == []
    with pytest.raises(ParseError, match="Unknown or unsupported"):
        DetectionFailed().unwrap()
    with pytest.raises(ParseError, match="boom"):
        ParseFailed(reason="boom").unwrap()


def test_qualifier_base_is_abstract():
    from seqparse.models import _QualifierBase

    with pytest.raises(TypeError):
        _QualifierBase()
