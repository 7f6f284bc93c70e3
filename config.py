import os

import dotenv
import yaml

import log
import oauth1

dotenv.load_dotenv()

class ConfigError(Exception):
	pass

class YamlAttrs:
	def __init__(self, filename, defaults=None):
		self.filename = filename

		try:
			with open(filename, 'r', encoding='utf-8') as f:
				doc = yaml.safe_load(f) or {}
		except FileNotFoundError:
			doc = None

		for k, v in (defaults or {}).items():
			setattr(self, k, v)
		if doc is None:
			log.write('creating ' + self.filename)
			self.save()
		else:
			for k, v in doc.items():
				setattr(self, k, v)

	def save(self):
		with open(self.filename, 'w', encoding='utf-8') as f:
			data = dict(self.__dict__)
			del data['filename']
			yaml.dump(data, f)

	def __str__(self):
		return '%s %s' % (self.__class__, self.__dict__)

# https://developer.twitter.com/en/docs/authentication/oauth-1-0a/api-key-and-secret
ENV_KEYS = {
	'consumer_key': 'TWITTER_API_KEY',
	'consumer_secret': 'TWITTER_API_SECRET_KEY',
	'token': 'TWITTER_ACCESS_TOKEN',
	'token_secret': 'TWITTER_ACCESS_TOKEN_SECRET',
}

def credentials(twitter=None):
	if twitter is None:
		twitter = bot.twitter or {}
	values = {}
	for field, env_key in ENV_KEYS.items():
		# yaml reads unquoted digits as ints
		value = os.environ.get(env_key) or twitter.get(field)
		values[field] = '' if value is None else str(value)
	missing = [field for field in oauth1.Credentials._fields if not values[field]]
	if missing:
		raise ConfigError('missing twitter credentials in %s or environment: %s' %
				(bot.filename, ', '.join(missing)))
	return oauth1.Credentials(**values)

bot = YamlAttrs(os.environ.get('TWEETPROXY_CONFIG', 'config.yaml'),
	defaults={
		'base_uri': 'https://api.twitter.com/2',
		'debug': False,
		'host': '127.0.0.1',
		'port': 8080,
		'timeout': 10,
		'twitter': {
			'consumer_key': '',
			'consumer_secret': '',
			'token': '',
			'token_secret': '',
		},
	})
