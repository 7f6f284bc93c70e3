import collections
import urllib.parse

import requests

import config
import oauth1

BASE_URI = 'https://api.twitter.com/2'

rs = requests.Session()
rs.headers['User-Agent'] = 'tweetproxy/0.0.1'

Upstream = collections.namedtuple('Upstream', ['status_code', 'body', 'content_type'])

class TwitterError(Exception):
	pass

class RequestBuildError(TwitterError):
	pass

class TransportError(TwitterError):
	pass

class ResponseReadError(TwitterError):
	pass

def post_tweet(credentials, text, base_uri=BASE_URI, timeout=None):
	# https://developer.twitter.com/en/docs/twitter-api/tweets/manage-tweets/api-reference/post-tweets
	return _request('POST', base_uri + '/tweets', credentials, {'text': text}, timeout)

def delete_tweet(credentials, tweet_id, base_uri=BASE_URI, timeout=None):
	url = '%s/tweets/%s' % (base_uri, urllib.parse.quote(str(tweet_id), safe=''))
	return _request('DELETE', url, credentials, None, timeout)

def _request(method, url, credentials, data, timeout):
	try:
		prepared = rs.prepare_request(requests.Request(method, url, json=data))
	except (requests.exceptions.RequestException, ValueError) as e:
		raise RequestBuildError('%s %s: %s' % (method, url, e)) from e
	# sign the URL requests actually sends, minus any query string
	signed_url = prepared.url.split('?', 1)[0]
	prepared.headers['Authorization'] = oauth1.auth_header(method, signed_url, credentials)
	prepared.headers['Content-Type'] = 'application/json'

	if config.bot.debug:
		print('->', method, signed_url)
	try:
		response = rs.send(prepared, timeout=timeout, stream=True)
	except requests.exceptions.RequestException as e:
		raise TransportError('%s %s: %s' % (method, url, e)) from e

	try:
		body = response.content
	except requests.exceptions.RequestException as e:
		raise ResponseReadError('%s %s: %s' % (method, url, e)) from e
	finally:
		response.close()
	if config.bot.debug:
		print('<-', response.status_code, body[:1000])
	return Upstream(response.status_code, body, response.headers.get('Content-Type'))
