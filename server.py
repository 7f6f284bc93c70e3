#!/usr/bin/env python3

import contextlib

import fastapi
import pydantic
import uvicorn

import config
import log
import twitter

@contextlib.asynccontextmanager
async def lifespan(app):
	# main() loads these before uvicorn starts; `uvicorn server:app` lands here instead
	if getattr(app.state, 'credentials', None) is None:
		app.state.credentials = config.credentials()
	yield
	log.flush()

app = fastapi.FastAPI(title='tweetproxy', lifespan=lifespan)

class Tweet(pydantic.BaseModel):
	message: str

def get_credentials(request: fastapi.Request):
	return request.app.state.credentials

@app.post('/tweet')
def post_tweet(tweet: Tweet, credentials=fastapi.Depends(get_credentials)):
	return _relay('POST', '/tweet', twitter.post_tweet, credentials, tweet.message)

@app.delete('/tweet/{tweet_id}')
def delete_tweet(tweet_id: str, credentials=fastapi.Depends(get_credentials)):
	return _relay('DELETE', '/tweet/' + tweet_id, twitter.delete_tweet, credentials, tweet_id)

def _relay(method, path, call, credentials, arg):
	try:
		upstream = call(credentials, arg, base_uri=config.bot.base_uri, timeout=config.bot.timeout)
	except twitter.TwitterError as e:
		log.error(method, path, e)
		raise fastapi.HTTPException(status_code=406, detail='error found: %s' % e)
	log.proxied(method, path, upstream.status_code)
	return fastapi.Response(content=upstream.body, status_code=upstream.status_code,
			media_type=upstream.content_type or 'application/json')

def main():
	try:
		app.state.credentials = config.credentials()
	except config.ConfigError as e:
		log.write(str(e))
		raise SystemExit(1)
	log.write('server started at http://%s:%d' % (config.bot.host, config.bot.port))
	uvicorn.run(app, host=config.bot.host, port=config.bot.port)

if __name__ == '__main__':
	main()
