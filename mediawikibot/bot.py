"""
See the Bot docstrings.
"""
import logging
from warnings import warn as _warn
from . import actions as _actions
from .codec import DEFAULT_FORMAT, Mapping, check_format, clean_params, decode
from .excs import MissingParametersError, UnknownActionError, WikiWarning
from .transport import Transport, TIMEOUT

__all__ = [
    'Bot',
    'DEFAULT_USERNAME',
    'DEFAULT_PASSWORD',
    'DEFAULT_COOKIE_FILE',
    'DEFAULT_USER_AGENT',
]

log = logging.getLogger(__name__)

DEFAULT_USERNAME = 'bot'
DEFAULT_PASSWORD = 'password'
DEFAULT_COOKIE_FILE = 'cookies.tmp'
DEFAULT_USER_AGENT = 'mediawikibot/1.0.0, python-requests'

# login and token lookups must always come back as a mapping
_STRUCTURED_FORMAT = 'json'

class Bot(object):
    """A client for one wiki's api.php, logged in as one user.

    Every action in ``mediawikibot.actions.ACTIONS`` can be called as a
    method taking a parameter dict (or keyword arguments) and an optional
    ``multipart`` override::

        bot.parse({'text': '==Heading 2=='})
        bot.query(prop='info', titles='Main Page')
        bot.upload({'filename': 'a.png', 'file': fobj, 'token': token})

    ``import`` is a Python keyword; use ``bot.import_`` or
    ``bot.call('import', ...)``.
    """
    #pylint: disable=too-many-arguments,too-many-instance-attributes
    def __init__(self, api, username=None, password=None,
                 cookie_file=DEFAULT_COOKIE_FILE,
                 user_agent=DEFAULT_USER_AGENT, api_format=DEFAULT_FORMAT,
                 debug=False, session=None):
        """Initialize a bot for the api.php at ``api``.

        ``username`` and ``password`` default to DEFAULT_USERNAME and
        DEFAULT_PASSWORD. Cookies are kept in ``cookie_file`` (pass None
        to keep them in memory only). ``api_format`` is the response format
        used when a call doesn't ask for one. ``session`` can be used to
        supply a preconfigured ``requests.Session``.
        """
        self.api = api
        self.username = username if username is not None else DEFAULT_USERNAME
        self.password = password if password is not None else DEFAULT_PASSWORD
        self.api_format = api_format
        self._transport = Transport(user_agent, cookie_file,
                                    TIMEOUT, session)
        self._edittoken = None
        self.debug = debug

    def __repr__(self):
        """Represent a Bot."""
        return '<Bot {user} at {api}>'.format(user=self.username, api=self.api)

    __str__ = __repr__

    def __eq__(self, other):
        """Check if two Bots talk to the same wiki as the same user."""
        if not isinstance(other, Bot):
            return NotImplemented
        return (self.api, self.username) == (other.api, other.username)

    def __hash__(self):
        """Bot.__hash__() <==> hash(Bot)"""
        return hash((self.api, self.username))

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def __getattr__(self, name):
        """Resolve ``bot.<action>`` to a caller for that action."""
        if name.startswith('_'):
            raise AttributeError(name)
        action = 'import' if name == 'import_' else name
        if action not in _actions.ACTIONS:
            raise UnknownActionError(name)
        def caller(params=None, multipart=None, **evil):
            return self._dispatch(action, params, multipart, evil)
        caller.__name__ = name
        caller.__doc__ = 'Call the {!r} action on the api.'.format(action)
        return caller

    def __dir__(self):
        """Include the actions in dir()."""
        names = set(super(Bot, self).__dir__())
        names.update(a for a in _actions.ACTIONS if a != 'import')
        names.add('import_')
        return sorted(names)

    @property
    def actions(self):
        """The names of all actions this bot can call."""
        return sorted(_actions.ACTIONS)

    @property
    def debug(self):
        """Whether requests and responses are traced to the log."""
        return self._transport.debug

    @debug.setter
    def debug(self, value):
        self._transport.debug = bool(value)

    def set_debug(self, debug):
        """Turn tracing of requests and responses on or off."""
        self.debug = debug

    def api_url(self, action):
        """Build the URL an action is POSTed to."""
        return '{api}?action={action}&'.format(api=self.api, action=action)

    def call(self, action, params=None, multipart=None, **evil):
        """Call ``action`` with ``params`` and return the decoded response.

        Keyword arguments are merged into ``params``. If ``multipart`` is
        None, the action's policy decides how the body is encoded.
        Errors reported by the wiki are returned like any other response;
        only client-side failures raise.
        """
        return self._dispatch(action, params, multipart, evil)

    def _dispatch(self, action, params, multipart, evil):
        # always called directly by call() or an action caller; _warn relies
        # on the user's frame being four levels up
        pol = _actions.policy(action)
        params = dict(params or {})
        params.update(evil)
        if not clean_params(params) and not pol.params_optional:
            raise MissingParametersError(action)
        if pol.xml_only:
            params['format'] = 'xml'
        elif not params.get('format'):
            params['format'] = self.api_format
        params['format'] = str(params['format']).lower()
        check_format(params['format'])
        if multipart is None:
            multipart = pol.multipart

        url = self.api_url(action)
        raw = self._transport.post(url, params, multipart)
        data = decode(raw, params['format'])

        if self.debug:
            log.debug('returned %r', data)
        if isinstance(data, Mapping):
            self._warn(data)
        return data

    @staticmethod
    def _warn(data):
        """Emit a WikiWarning for each module the API warned about."""
        warnings = data.value.get('warnings')
        if not isinstance(warnings, dict):
            return
        for module, value in warnings.items():
            if isinstance(value, dict):
                value = value.get('*', value.get('warnings', value))
            _warn('warning from {} module: {}'.format(module, value),
                  getattr(WikiWarning, module), stacklevel=4)

    def login(self):
        """Log in with the configured username and password.

        MediaWiki requires a dual login to confirm authenticity: the first
        request hands out a token which the second one has to send back.
        Returns the decoded response of the last request, whether the login
        worked or not; it worked if ``result['login']['result']`` is
        ``'Success'``.
        """
        params = {
            'lgname': self.username,
            'lgpassword': self.password,
            'format': _STRUCTURED_FORMAT,
        }
        first = self.call('login', params)
        info = first.get('login') or {}
        token = info.get('token') if isinstance(info, dict) else None
        if token is None or info.get('result') == 'Success':
            return first
        params['lgtoken'] = token
        return self.call('login', params)

    def logout(self):
        """Log out, and forget the cached edit token with the session."""
        data = self.call('logout')
        self._edittoken = None
        return data

    def get_edit_token(self):
        """Return the edit token, asking the api for one if none is cached.

        Returns None if the api didn't hand one out.
        """
        if self._edittoken is None:
            self._edittoken = self._acquire_edit_token()
        return self._edittoken

    def _acquire_edit_token(self):
        data = self.call('tokens', {'type': 'edit',
                                    'format': _STRUCTURED_FORMAT})
        tokens = data.get('tokens')
        if isinstance(tokens, dict):
            return tokens.get('edittoken')
        return None

    def reset(self):
        """Forget the cached edit token so the next one is fetched anew."""
        self._edittoken = None

    def clear_cookies(self):
        """Forget the session cookies (and clear the cookie file)."""
        self._transport.clear_cookies()

    def close(self):
        """Close the underlying HTTP session."""
        self._transport.close()
