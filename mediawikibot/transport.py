"""
mediawikibot.transport - the HTTP side of things.

A Transport owns one ``requests`` session: its user agent, its timeout
and its cookie jar. With a ``cookie_file`` the jar is an LWP cookie file
that is loaded on startup and saved after every response, so the session
cookie from a login carries over to later requests (and later processes).
"""
import os
import logging
from http import cookiejar
import requests
from .codec import encode_body
from .excs import TransportError

__all__ = ['Transport', 'TIMEOUT']

log = logging.getLogger(__name__)

TIMEOUT = 15

class Transport(object):
    """POSTs request bodies to the API and hands back the raw response."""

    def __init__(self, user_agent, cookie_file=None,
                 timeout=TIMEOUT, session=None):
        """Set up the session.

        ``session`` may be an existing ``requests.Session`` (or anything
        with a compatible ``post``); a new one is created otherwise.
        """
        self.user_agent = user_agent
        self.cookie_file = cookie_file
        self.timeout = timeout
        self.debug = False
        self._session = session if session is not None else requests.session()
        if cookie_file is not None:
            self._session.cookies = self._load_cookies(cookie_file)

    def __repr__(self):
        """Represent a Transport."""
        return '<Transport {ua!r}>'.format(ua=self.user_agent)

    __str__ = __repr__

    @staticmethod
    def _load_cookies(cookie_file):
        jar = cookiejar.LWPCookieJar(cookie_file)
        if os.path.exists(cookie_file):
            try:
                jar.load(ignore_discard=True, ignore_expires=True)
            except cookiejar.LoadError as exc:
                log.warning('Ignoring unreadable cookie file %s: %s',
                            cookie_file, exc)
        return jar

    def _save_cookies(self):
        jar = getattr(self._session, 'cookies', None)
        if isinstance(jar, cookiejar.FileCookieJar):
            jar.save(ignore_discard=True, ignore_expires=True)

    def clear_cookies(self):
        """Forget all cookies, including those in the cookie file."""
        jar = getattr(self._session, 'cookies', None)
        if jar is not None:
            jar.clear()
        self._save_cookies()

    def post(self, url, params, multipart=False):
        """POST ``params`` to ``url``; return the response body as bytes.

        Raises TransportError if the request can't be completed or the
        server answers with an error status.
        """
        body, content_type = encode_body(params, multipart)
        headers = {'User-Agent': self.user_agent}

        if self.debug:
            log.debug('request to %s', url)
            log.debug('with data %r', params)
            log.debug('posted as %s', content_type)

        try:
            if multipart:
                response = self._session.post(url, files=body,
                                              headers=headers,
                                              timeout=self.timeout)
            else:
                headers['Content-Type'] = content_type
                response = self._session.post(url, data=body,
                                              headers=headers,
                                              timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            status = getattr(exc.response, 'status_code', None)
            raise TransportError('HTTP error from {}: {}'.format(url, exc),
                                 url, status) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError('Request to {} failed: {}'.format(url, exc),
                                 url) from exc

        self._save_cookies()
        return response.content

    def close(self):
        """Close the underlying session."""
        close = getattr(self._session, 'close', None)
        if close is not None:
            close()
