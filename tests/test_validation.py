import asyncio

import pytest
import requests

from packages.engine import Verdict, check_word, is_valid_word, precheck
from packages.engine.lookup import DictionaryApiLookup, PoolLookup


def _check(word, sequence, lookup):
    return asyncio.run(check_word(word, sequence, lookup))


# --- local checks run before (and instead of) the lookup ---
@pytest.mark.parametrize("word,sequence,expected", [
    ("pl-ain", "LIN", Verdict.HYPHENATED),
    ("hell", "HEL", Verdict.PROFANE),
    ("HeLL", "HEL", Verdict.PROFANE),
    ("nail", "LIN", Verdict.OUT_OF_ORDER),
])
def test_rejected_without_lookup(word, sequence, expected, counting_lookup):
    assert _check(word, sequence, counting_lookup) is expected
    assert counting_lookup.calls == []


def test_denylist_is_exact_match_not_substring(counting_lookup):
    # "hello" contains "hell" but is not itself on the list
    assert precheck("hello", "HLO") is None
    assert _check("hello", "HLO", counting_lookup) is Verdict.VALID
    assert counting_lookup.calls == ["hello"]


def test_valid_word_goes_to_lookup(counting_lookup):
    assert _check("plain", "LIN", counting_lookup) is Verdict.VALID
    assert counting_lookup.calls == ["plain"]


def test_lookup_says_no(counting_lookup):
    counting_lookup.answer = False
    assert _check("plinth", "LIN", counting_lookup) is Verdict.UNKNOWN_WORD


def test_lookup_failure_is_not_a_crash():
    async def broken(word):
        raise ConnectionError("offline")

    assert _check("plain", "LIN", broken) is Verdict.UNKNOWN_WORD
    assert asyncio.run(is_valid_word("plain", "LIN", broken)) is False


def test_pool_lookup_case_insensitive():
    lookup = PoolLookup(["plain", "LINK"])
    assert asyncio.run(lookup("PLAIN")) is True
    assert asyncio.run(lookup("link ")) is True
    assert asyncio.run(lookup("nail")) is False


# --- HTTP lookup against a fake session ---
class FakeResponse:
    def __init__(self, status=200, payload=None, bad_json=False):
        self.status_code = status
        self.payload = payload
        self.bad_json = bad_json

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self.bad_json:
            raise ValueError("not json")
        return self.payload


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.urls = []

    def get(self, url, timeout):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.mark.parametrize("response,expected", [
    (FakeResponse(200, [{"word": "plain"}]), True),
    (FakeResponse(200, [{"word": "Plain"}]), True),
    (FakeResponse(200, [{"word": "plains"}]), False),
    (FakeResponse(404, {"title": "No Definitions Found"}), False),
    (FakeResponse(200, bad_json=True), False),
    (FakeResponse(200, {"word": "plain"}), False),
    (FakeResponse(200, []), False),
    (FakeResponse(200, ["plain"]), False),
])
def test_api_lookup_responses(response, expected):
    lookup = DictionaryApiLookup(session=FakeSession(response))
    assert asyncio.run(lookup("plain")) is expected


def test_api_lookup_network_error():
    session = FakeSession(exc=requests.ConnectionError("down"))
    lookup = DictionaryApiLookup(session=session)
    assert lookup.fetch("plain") is False


def test_api_lookup_url_encodes_word():
    session = FakeSession(FakeResponse(404))
    DictionaryApiLookup(session=session).fetch("a b/c")
    assert session.urls == ["https://api.dictionaryapi.dev/api/v2/entries/en/a%20b%2Fc"]
