from __future__ import annotations

import itertools

import pytest

from ftsearch import QueryOptions, QueryResults, ReplyShapeError
from ftsearch.response._callbacks import SearchResultCallback, SimpleStringCallback


def build_reply(query: QueryOptions, count: int) -> list:
    reply: list = [count]
    for i in range(count):
        reply.append(f"doc:{i}")
        if query.with_scores:
            reply.append(str(i + 0.5))
        if query.explain_score:
            reply.append([f"explanation {i}"])
        if not query.no_content:
            reply.append(["title", f"title {i}", "body", f"body {i}"])
    return reply


class TestSearchResultCallback:
    @pytest.mark.parametrize(
        "no_content, with_scores, explain_score",
        list(itertools.product([False, True], repeat=3)),
    )
    def test_flag_combinations(self, no_content, with_scores, explain_score):
        query = (
            QueryOptions("idx", "*")
            .with_no_content(no_content)
            .include_scores(with_scores)
            .with_explain_score(explain_score)
        )
        reply = build_reply(query, 3)
        assert len(reply) == 1 + 3 * query.stride

        results = SearchResultCallback(query)(reply)

        assert results.count == 3
        assert list(results.documents) == ["doc:0", "doc:1", "doc:2"]
        for i, (key, document) in enumerate(results.documents.items()):
            assert document.key == key
            if with_scores:
                assert document.score == i + 0.5
            else:
                assert document.score is None
            if explain_score:
                assert document.explanation == [f"explanation {i}"]
            else:
                assert document.explanation is None
            if no_content:
                assert document.fields is None
            else:
                assert document.fields == {"title": f"title {i}", "body": f"body {i}"}

    def test_scores_with_content(self):
        query = QueryOptions("idx", "hello").include_scores()
        reply = [5, "doc:1", "1.5", ["title", "a"], "doc:2", "0.5", ["title", "b"]]
        results = SearchResultCallback(query)(reply)
        assert isinstance(results, QueryResults)
        assert results.count == 5
        assert len(results) == 2
        assert results["doc:1"].score == 1.5
        assert results["doc:2"].fields["title"] == "b"

    def test_total_count_exceeds_page(self):
        results = SearchResultCallback(QueryOptions("idx", "*"))([100])
        assert results.count == 100
        assert results.documents == {}

    def test_bytes_reply(self):
        reply = [1, b"doc:1", [b"title", b"hello"]]
        document = SearchResultCallback(QueryOptions("idx", "*"))(reply)[b"doc:1"]
        assert document.fields["title"] == b"hello"
        assert document.fields[b"title"] == b"hello"
        assert "title" in document.fields

    def test_json_document(self):
        reply = [1, "doc:1", ["$", '{"name": "test", "tags": ["a", "b"]}']]
        document = SearchResultCallback(QueryOptions("idx", "*"))(reply)["doc:1"]
        assert document.fields == {"name": "test", "tags": ["a", "b"]}

    def test_json_document_with_other_fields(self):
        reply = [1, "doc:1", ["$", '{"name": "test"}', "score_field", "3"]]
        document = SearchResultCallback(QueryOptions("idx", "*"))(reply)["doc:1"]
        assert document.fields == {"$": {"name": "test"}, "score_field": "3"}

    def test_json_document_with_other_fields_bytes(self):
        reply = [1, b"doc:1", [b"$", b'{"name": "test"}', b"title", b"a"]]
        document = SearchResultCallback(QueryOptions("idx", "*"))(reply)[b"doc:1"]
        assert document.fields["$"] == {"name": "test"}
        assert document.fields["title"] == b"a"
        assert b"$" not in document.fields.__wrapped__

    @pytest.mark.parametrize("value", ["{not json", "", b"\xff\xfe"])
    def test_invalid_json_document(self, value):
        reply = [1, "doc:1", ["$", value]]
        with pytest.raises(ReplyShapeError) as exc_info:
            SearchResultCallback(QueryOptions("idx", "*"))(reply)
        assert exc_info.value.reply == reply
        assert exc_info.value.__cause__ is not None

    def test_invalid_json_document_resp3(self):
        reply = {
            "total_results": 1,
            "results": [{"id": "doc:1", "extra_attributes": {"$": "{not json"}}],
        }
        with pytest.raises(ReplyShapeError):
            SearchResultCallback(QueryOptions("idx", "*"))(reply, version=3)

    def test_duplicate_document_key(self):
        reply = [2, "doc:1", ["title", "a"], "doc:1", ["title", "b"]]
        with pytest.raises(ReplyShapeError, match="more than once") as exc_info:
            SearchResultCallback(QueryOptions("idx", "*"))(reply)
        assert exc_info.value.reply == reply

    def test_duplicate_document_key_resp3(self):
        reply = {
            "total_results": 2,
            "results": [{"id": "doc:1"}, {"id": "doc:1"}],
        }
        query = QueryOptions("idx", "*").with_no_content()
        with pytest.raises(ReplyShapeError, match="more than once"):
            SearchResultCallback(query)(reply, version=3)

    def test_json_document_decoding_disabled(self, json_decoding):
        json_decoding.decode_json_documents = False
        reply = [1, "doc:1", ["$", '{"name": "test"}']]
        document = SearchResultCallback(QueryOptions("idx", "*"))(reply)["doc:1"]
        assert document.fields == {"$": '{"name": "test"}'}

    @pytest.mark.parametrize(
        "query, reply",
        [
            (QueryOptions("idx", "*").include_scores(), [1, "doc:1", ["title", "a"]]),
            (QueryOptions("idx", "*"), [2, "doc:1", ["title", "a"], "doc:2"]),
            (QueryOptions("idx", "*").with_no_content(), ["1", "doc:1"]),
            (QueryOptions("idx", "*").with_no_content(), [True, "doc:1"]),
            (QueryOptions("idx", "*").with_no_content(), []),
            (QueryOptions("idx", "*").with_no_content(), "OK"),
            (QueryOptions("idx", "*").with_no_content(), [1, 1]),
            (QueryOptions("idx", "*"), [1, "doc:1", ["title"]]),
            (QueryOptions("idx", "*"), [1, "doc:1", "title"]),
            (
                QueryOptions("idx", "*").include_scores(),
                [1, "doc:1", "not-a-score", ["title", "a"]],
            ),
        ],
    )
    def test_shape_mismatch(self, query, reply):
        with pytest.raises(ReplyShapeError) as exc_info:
            SearchResultCallback(query)(reply)
        assert exc_info.value.reply == reply

    def test_error_reply_raised(self):
        error = RuntimeError("Unknown Index name")
        with pytest.raises(RuntimeError, match="Unknown Index name"):
            SearchResultCallback(QueryOptions("idx", "*"))(error)

    def test_resp3_map(self):
        query = QueryOptions("idx", "*").include_scores()
        reply = {
            "attributes": [],
            "total_results": 2,
            "format": "STRING",
            "results": [
                {"id": "doc:1", "score": 2.0, "extra_attributes": {"title": "a"}},
                {"id": "doc:2", "score": 1.0, "extra_attributes": {"title": "b"}},
            ],
            "warning": [],
        }
        results = SearchResultCallback(query)(reply, version=3)
        assert results.count == 2
        assert results["doc:1"].score == 2.0
        assert results["doc:2"].fields == {"title": "b"}

    def test_resp3_explain_score(self):
        query = QueryOptions("idx", "*").include_scores().with_explain_score()
        reply = {
            b"total_results": 1,
            b"results": [
                {
                    b"id": b"doc:1",
                    b"score": [b"1.5", [b"Final TFIDF"]],
                    b"extra_attributes": {},
                }
            ],
        }
        document = SearchResultCallback(query)(reply, version=3)[b"doc:1"]
        assert document.score == 1.5
        assert document.explanation == [b"Final TFIDF"]
        assert document.fields == {}

    def test_resp3_no_content(self):
        query = QueryOptions("idx", "*").with_no_content()
        reply = {"total_results": 1, "results": [{"id": "doc:1"}]}
        document = SearchResultCallback(query)(reply, version=3)["doc:1"]
        assert document.fields is None
        assert document.score is None

    def test_resp3_flat_reply(self):
        query = QueryOptions("idx", "*").with_no_content()
        results = SearchResultCallback(query)([2, "doc:1", "doc:2"], version=3)
        assert list(results.documents) == ["doc:1", "doc:2"]

    @pytest.mark.parametrize(
        "reply",
        [
            {"results": []},
            {"total_results": 1, "results": [{"score": 1.0}]},
            {"total_results": 1, "results": ["doc:1"]},
            "OK",
        ],
    )
    def test_resp3_shape_mismatch(self, reply):
        with pytest.raises(ReplyShapeError):
            SearchResultCallback(QueryOptions("idx", "*"))(reply, version=3)


class TestSimpleStringCallback:
    @pytest.mark.parametrize(
        "response, expected",
        [("OK", True), (b"OK", True), ("QUEUED", False), (None, False), (1, False)],
    )
    def test_transform(self, response, expected):
        assert SimpleStringCallback()(response) is expected
