from conftest import FakeResponse
from vocabdeck.fetchers.base import FetchStatus
from vocabdeck.fetchers.free_dictionary_fetcher import FreeDictionaryFetcher


def test_one_candidate_per_part_of_speech(fake_get):
    fake_get.response = FakeResponse(payload=[{
        'word': 'test',
        'meanings': [
            {'partOfSpeech': 'noun', 'definitions': [
                {'definition': 'a test', 'example': 'it was a test'},
                {'definition': 'a second noun sense'},
            ]},
            {'partOfSpeech': 'verb', 'definitions': [{'definition': 'to try'}]},
        ],
    }])

    candidates = FreeDictionaryFetcher().fetch_definitions('test')

    assert [c.to_dict() for c in candidates] == [
        {'partOfSpeech': 'noun', 'definition': 'a test', 'example': 'it was a test'},
        {'partOfSpeech': 'verb', 'definition': 'to try', 'example': None},
    ]


def test_only_first_three_meanings_in_order(fake_get):
    meanings = [
        {'partOfSpeech': pos, 'definitions': [{'definition': f'{pos} sense'}]}
        for pos in ['verb', 'noun', 'adjective', 'adverb']
    ]
    fake_get.response = FakeResponse(payload=[{'meanings': meanings}])

    candidates = FreeDictionaryFetcher().fetch_definitions('run')

    assert [c.partOfSpeech for c in candidates] == ['verb', 'noun', 'adjective']


def test_definition_used_verbatim(fake_get):
    fake_get.response = FakeResponse(payload=[{'meanings': [
        {'partOfSpeech': 'noun', 'definitions': [{'definition': '  short <b>x</b> '}]},
    ]}])

    candidates = FreeDictionaryFetcher().fetch_definitions('x')

    assert candidates[0].definition == '  short <b>x</b> '


def test_skips_meanings_without_a_definition(fake_get):
    fake_get.response = FakeResponse(payload=[{'meanings': [
        {'partOfSpeech': 'noun', 'definitions': []},
        {'definitions': [{'definition': 'unlabelled sense', 'example': ''}]},
    ]}])

    candidates = FreeDictionaryFetcher().fetch_definitions('x')

    assert [c.to_dict() for c in candidates] == [
        {'partOfSpeech': 'definition', 'definition': 'unlabelled sense', 'example': None},
    ]


def test_builds_encoded_url(fake_get):
    fake_get.response = FakeResponse(payload=[])

    result = FreeDictionaryFetcher().fetch('Café au lait')

    assert result.status == FetchStatus.EMPTY
    assert fake_get.calls[0]['url'] == (
        'https://api.dictionaryapi.dev/api/v2/entries/en/Caf%C3%A9%20au%20lait'
    )


def test_word_not_found_is_empty(fake_get):
    fake_get.response = FakeResponse(status_code=404, payload={'title': 'No Definitions Found'})

    assert FreeDictionaryFetcher().fetch('qwzx').status == FetchStatus.EMPTY


def test_malformed_payload_is_failed(fake_get):
    fake_get.response = FakeResponse(payload=[{'meanings': 'not a list of meanings'}])

    result = FreeDictionaryFetcher().fetch('x')

    assert result.status == FetchStatus.FAILED
    assert result.candidates == []
