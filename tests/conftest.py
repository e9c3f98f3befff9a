"""
Shared fixtures: a five-movie catalogue where the first two movies overlap on
every categorical field and the other three share nothing with anyone.
"""

import pytest

from recommender.engine import ContentBasedRecommendationEngine
from recommender.models import Movie


def make_movie(**fields) -> Movie:
	defaults = dict(
		id=0,
		title='',
		overview='',
		genres=[],
		cast=[],
		director='',
		keywords=[],
		rating=5.0,
		runtime=100,
		release_date='2000-01-01',
		budget=0.0,
		revenue=0.0,
	)
	defaults.update(fields)
	return Movie(**defaults)


@pytest.fixture
def catalogue():
	alpha = make_movie(
		id=1,
		title='Alpha Heist',
		overview='A crew plans a vault robbery.',
		genres=['Crime', 'Thriller'],
		cast=['Mara Stone', 'Ivo Petrov'],
		director='Lena Kurtz',
		keywords=['vault', 'robbery', 'betrayal'],
		rating=8.0,
		runtime=120,
		release_date='2010-05-01',
		budget=100_000_000,
		revenue=300_000_000,
	)
	bravo = make_movie(
		id=2,
		title='Bravo Heist',
		overview='A crew plans a casino robbery.',
		genres=['Crime', 'Thriller'],
		cast=['Mara Stone', 'Ivo Petrov'],
		director='Lena Kurtz',
		keywords=['vault', 'robbery', 'betrayal'],
		rating=7.5,
		runtime=110,
		release_date='2012-03-03',
		budget=50_000_000,
	)
	cosmic = make_movie(
		id=3,
		title='Cosmic Garden',
		overview='A botanist grows orchids on Mars.',
		genres=['Documentary'],
		cast=['Paul Wren'],
		director='Sofia Lind',
		keywords=['botany', 'space'],
		rating=6.2,
		runtime=95,
		release_date='2010-11-20',
	)
	desert = make_movie(
		id=4,
		title='Desert Song',
		overview='A nomad musician wanders the dunes.',
		genres=['Musical'],
		cast=['Omar Faris'],
		director='Yuki Mori',
		keywords=['music', 'desert'],
		rating=9.1,
		runtime=101,
		release_date='1994-01-01',
		budget=2_000_000,
		revenue=10_000_000,
	)
	echo = make_movie(
		id=5,
		title='Echo Lake',
		overview='A fisherman hears voices underwater.',
		genres=['Horror'],
		cast=['Greta Holm'],
		director='Tom Byrne',
		keywords=['lake', 'ghost'],
		rating=4.0,
		runtime=88,
		release_date='not a date',
		revenue=5_000_000,
	)
	return [alpha, bravo, cosmic, desert, echo]


@pytest.fixture
def engine(catalogue):
	return ContentBasedRecommendationEngine(catalogue)
