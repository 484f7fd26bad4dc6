from conftest import FakeResponse
from vocabdeck.fetchers.base import FetchStatus
from vocabdeck.fetchers.wordsapi_fetcher import WordsApiFetcher


def test_skips_results_without_definition(fake_get):
    fake_get.response = FakeResponse(payload={'word': 'bright', 'results': [
        {'partOfSpeech': 'adjective', 'synonyms': ['brilliant']},
        {'partOfSpeech': 'adjective', 'definition': 'emitting or reflecting light',
         'examples': ['the sun was bright', 'a bright room']},
        {'definition': 'characterized by quickness of mind'},
    ]})

    candidates = WordsApiFetcher(api_key='key').fetch_definitions('bright')

    assert [c.to_dict() for c in candidates] == [
        {'partOfSpeech': 'adjective', 'definition': 'emitting or reflecting light',
         'example': 'the sun was bright'},
        {'partOfSpeech': 'definition', 'definition': 'characterized by quickness of mind',
         'example': None},
    ]


def test_only_first_three_results_scanned(fake_get):
    results = [{'definition': f'sense {i}'} for i in range(5)]
    fake_get.response = FakeResponse(payload={'results': results})

    candidates = WordsApiFetcher(api_key='key').fetch_definitions('word')

    assert [c.definition for c in candidates] == ['sense 0', 'sense 1', 'sense 2']


def test_sends_rapidapi_headers(fake_get):
    fake_get.response = FakeResponse(payload={'results': []})

    result = WordsApiFetcher(api_key='secret').fetch('New York')

    call = fake_get.calls[0]
    assert result.status == FetchStatus.EMPTY
    assert call['url'] == 'https://wordsapiv1.p.rapidapi.com/words/New%20York'
    assert call['headers'] == {
        'X-RapidAPI-Key': 'secret',
        'X-RapidAPI-Host': 'wordsapiv1.p.rapidapi.com',
    }


def test_without_key_makes_no_request(fake_get):
    fetcher = WordsApiFetcher(api_key='')

    result = fetcher.fetch('word')

    assert not fetcher.is_configured()
    assert result.status == FetchStatus.FAILED
    assert result.error == 'not configured'
    assert fake_get.calls == []


def test_unauthorized_is_failed(fake_get):
    fake_get.response = FakeResponse(status_code=403, payload={'message': 'forbidden'})

    result = WordsApiFetcher(api_key='bad').fetch('word')

    assert result.status == FetchStatus.FAILED
    assert result.error == 'HTTP 403'
