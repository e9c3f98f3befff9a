"""
Unit tests for tokenization and content building.
"""

from recommender.tokenizer import build_content, tokenize, tokenize_movie

from conftest import make_movie


def test_lowercases_and_strips_punctuation():
	assert tokenize("Hello, World! It's a TEST-case_x") == ['hello', 'world', 'test', 'case_x']


def test_drops_tokens_of_two_characters_or_less():
	assert tokenize("an ox is at the zoo") == ['the', 'zoo']


def test_keeps_duplicates_in_order():
	assert tokenize("crime drama crime") == ['crime', 'drama', 'crime']


def test_digits_are_word_characters():
	assert tokenize("Blade Runner 2049 (1982)") == ['blade', 'runner', '2049', '1982']


def test_empty_and_whitespace_only_text():
	assert tokenize('') == []
	assert tokenize('  \t\n ') == []
	assert tokenize('a b c ?!') == []


def test_build_content_field_order():
	movie = make_movie(
		title='Title',
		overview='Overview text',
		genres=['Drama', 'War'],
		cast=['Ann Lee', 'Bo Kim'],
		director='Dir Name',
		keywords=['key one', 'key two'],
	)
	assert build_content(movie) == 'Title Overview text Drama War Ann Lee Bo Kim Dir Name key one key two'


def test_tokenize_movie_uses_every_field():
	movie = make_movie(
		title='Heat',
		overview='Cops and robbers.',
		genres=['Crime'],
		cast=['Al Pacino'],
		director='Michael Mann',
		keywords=['heist'],
	)
	assert tokenize_movie(movie) == [
		'heat', 'cops', 'and', 'robbers', 'crime', 'pacino', 'michael', 'mann', 'heist',
	]
