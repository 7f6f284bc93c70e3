import base64
import collections
import hmac
import secrets
import time
import urllib.parse

Credentials = collections.namedtuple('Credentials',
		['consumer_key', 'consumer_secret', 'token', 'token_secret'])

SIGNATURE_METHOD = 'HMAC-SHA1'
VERSION = '1.0'

def percent_encode(s):
	# RFC 3986 unreserved is A-Z a-z 0-9 - . _ ~ and quote() leaves exactly those alone with safe='~'
	return urllib.parse.quote(s, safe='~')

def base_string(method, url, params):
	# https://developer.twitter.com/en/docs/authentication/oauth-1-0a/creating-a-signature
	parameter_string = '&'.join('%s=%s' % (percent_encode(k), percent_encode(v))
			for k, v in sorted(params.items()))
	# that's right! we re-quote the parameter string
	return '%s&%s&%s' % (method, percent_encode(url), percent_encode(parameter_string))

def sign(base, consumer_secret, token_secret):
	signing_key = '%s&%s' % (percent_encode(consumer_secret), percent_encode(token_secret))
	mac = hmac.new(signing_key.encode('ascii'), base.encode('utf-8'), 'sha1')
	return base64.b64encode(mac.digest()).decode('ascii')

def serialize(params):
	# https://developer.twitter.com/en/docs/authentication/oauth-1-0a/authorizing-a-request
	return 'OAuth ' + ', '.join('%s="%s"' % (percent_encode(k), percent_encode(v))
			for k, v in sorted(params.items()))

def auth_header(method, url, credentials, nonce=None, timestamp=None):
	"""Build the Authorization header value for one request.

	url must not carry a query string. nonce and timestamp are generated fresh unless given,
	which is only useful for reproducing a known signature.
	"""
	if nonce is None:
		nonce = secrets.token_hex(32)
	if timestamp is None:
		timestamp = str(int(time.time()))

	params = {
		'oauth_consumer_key': credentials.consumer_key,
		'oauth_nonce': nonce,
		'oauth_signature_method': SIGNATURE_METHOD,
		'oauth_timestamp': timestamp,
		'oauth_token': credentials.token,
		'oauth_version': VERSION,
	}
	signature = sign(base_string(method, url, params),
			credentials.consumer_secret, credentials.token_secret)
	return serialize(dict(params, oauth_signature=signature))
