import pytest

from wordguess.services.word_catalog import ConfigurationError, WordCatalog, load_word_catalog


def test_load_word_catalog_parses_difficulty_lines(words_file):
    catalog = load_word_catalog(words_file, 'easy')
    assert catalog.difficulties == ['easy', 'medium']
    assert catalog.words_for('easy') == ('chat',)
    assert catalog.words_for('medium') == ('bonjour',)
    assert catalog.words_for('hard') == ()


def test_load_word_catalog_strips_whitespace(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("  easy :  chat  \neasy:lion\nbad:line:here\n\n", encoding='utf-8')
    catalog = load_word_catalog(path, 'easy')
    assert catalog.words_for('easy') == ('chat', 'lion')
    assert catalog.difficulties == ['easy']


def test_missing_file_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_word_catalog(tmp_path / 'missing.txt', 'easy')


def test_empty_default_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        WordCatalog({'easy': [], 'hard': ['kayak']}, 'easy')
    with pytest.raises(ConfigurationError):
        WordCatalog({'hard': ['kayak']}, 'easy')


def test_resolve_falls_back_to_default(catalog):
    assert catalog.resolve('medium') == ('bonjour',)
    assert catalog.resolve('hard') == ('chat',)
    assert catalog.resolve('nope') == ('chat',)


def test_catalog_is_immutable(catalog):
    with pytest.raises(TypeError):
        catalog._words['easy'] = ('other',)


def test_statistics(catalog):
    stats = catalog.statistics()
    assert stats['total_words'] == 2
    assert stats['default_difficulty'] == 'easy'
    assert stats['difficulties']['medium'] == {'words': 1, 'min_length': 7, 'max_length': 7}
    assert stats['difficulties']['hard'] == {'words': 0, 'min_length': 0, 'max_length': 0}


def test_bundled_word_list_is_usable():
    import os
    path = os.path.join(os.path.dirname(__file__), '..', 'words', 'words.txt')
    catalog = load_word_catalog(path, 'easy')
    assert set(catalog.difficulties) == {'easy', 'medium', 'hard'}
    assert all(word.isalpha() for d in catalog.difficulties for word in catalog.words_for(d))
