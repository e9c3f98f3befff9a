"""
API tests against the bundled dataset.
"""

import pytest
from fastapi.testclient import TestClient

from api import app


@pytest.fixture(scope='module')
def client():
	# entering the context runs the startup hook, which builds the engine
	with TestClient(app) as c:
		yield c


def test_health(client):
	response = client.get('/health')
	assert response.status_code == 200
	data = response.json()
	assert data['status'] == 'ok'
	assert data['engine_ready'] is True


def test_recommend(client):
	response = client.get('/recommend', params={'title': 'dark knight', 'top_n': 5})
	assert response.status_code == 200
	data = response.json()
	assert data['matched']['title'] == 'The Dark Knight'
	assert len(data['results']) == 5
	assert 155 not in [r['movie']['id'] for r in data['results']]
	similarities = [r['similarity'] for r in data['results']]
	assert similarities == sorted(similarities, reverse=True)


def test_recommend_no_match(client):
	response = client.get('/recommend', params={'title': 'zzz-nonexistent-title'})
	assert response.status_code == 200
	data = response.json()
	assert data['matched'] is None
	assert data['results'] == []


def test_recommend_validates_top_n(client):
	response = client.get('/recommend', params={'title': 'matrix', 'top_n': 0})
	assert response.status_code == 422


def test_browse(client):
	response = client.get('/movies', params={'min_rating': 8.5, 'sort_by': 'title'})
	assert response.status_code == 200
	data = response.json()
	assert data['count'] == len(data['results']) > 0
	assert all(m['rating'] >= 8.5 for m in data['results'])
	titles = [m['title'] for m in data['results']]
	assert titles == sorted(titles, key=str.casefold)


def test_browse_unknown_sort(client):
	response = client.get('/movies', params={'sort_by': 'popularity'})
	assert response.status_code == 400


def test_movie_detail(client):
	response = client.get('/movies/603')
	assert response.status_code == 200
	assert response.json()['title'] == 'The Matrix'
	assert response.json()['year'] == 1999

	assert client.get('/movies/1').status_code == 404


def test_genres_and_stats(client):
	genres = client.get('/genres').json()
	assert genres == sorted(set(genres))

	stats = client.get('/stats').json()
	assert stats['total_movies'] == 15
	assert stats['total_genres'] == len(genres)
	assert stats['vocabulary_size'] > 0


def test_analytics(client):
	data = client.get('/analytics').json()
	assert sum(b['count'] for b in data['ratings']) == 15
	years = [row['year'] for row in data['releases_per_year']]
	assert years == sorted(years)
	assert all(y >= 1990 for y in years)
	assert data['genres'][0]['count'] >= data['genres'][-1]['count']
