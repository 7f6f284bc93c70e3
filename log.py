from datetime import datetime
import os
import sys

logfile = open(os.environ.get('TWEETPROXY_LOG', 'tweetproxy.log'), 'a', encoding='utf-8')
stdout = sys.stdout.isatty()

def write(text):
	line = '%s %s' % (datetime.now(), text)
	if 0 <= line.rfind('\n') < len(line)-1:
		line += '\n\n'
	else:
		line += '\n'

	if stdout:
		print(line, end='')
	logfile.write(line)

def proxied(method, path, status_code):
	write('%s %s -> upstream %d' % (method, path, status_code))
	flush()

def error(method, path, exc):
	# never include the request itself; it carries the Authorization header
	write('%s %s failed: %s: %s' % (method, path, exc.__class__.__name__, exc))
	flush()

def flush():
	logfile.flush()

def close():
	logfile.close()
