from types import SimpleNamespace

from kisan_assistant.models.advice import Citation, GroundingMetadata
from kisan_assistant.services.citations import extract_citations


def test_absent_metadata():
    assert extract_citations(None) == []
    assert extract_citations({}) == []


def test_duplicates_are_kept_and_webless_chunks_skipped():
    metadata = {
        "groundingChunks": [
            {"web": {"uri": "u1", "title": "t1"}},
            {},
            {"web": {"uri": "u1", "title": "t1"}},
        ]
    }
    citations = extract_citations(metadata)
    assert citations == [Citation(uri="u1", title="t1"), Citation(uri="u1", title="t1")]


def test_chunk_order_is_preserved():
    metadata = GroundingMetadata.model_validate(
        {
            "grounding_chunks": [
                {"web": {"uri": "https://enam.gov.in", "title": "eNAM"}},
                {"web": {"uri": "https://agmarknet.gov.in", "title": "Agmarknet"}},
            ]
        }
    )
    assert [c.title for c in extract_citations(metadata)] == ["eNAM", "Agmarknet"]


def test_missing_title_becomes_empty_string():
    citations = extract_citations({"grounding_chunks": [{"web": {"uri": "u"}}]})
    assert citations == [Citation(uri="u", title="")]


def test_unexpected_shape_yields_nothing():
    assert extract_citations({"grounding_chunks": "not a list"}) == []
    assert extract_citations(SimpleNamespace(grounding_chunks=[])) == []
