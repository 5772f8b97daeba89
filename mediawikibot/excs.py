"""
mediawikibot.excs - Exceptions and warnings for API requests.

Only problems on *this* side of the wire are exceptions: a bad action
name, missing parameters, a failed HTTP exchange, or a body that can't
be decoded. Whatever the wiki itself answers (a failed login, a
``permissiondenied`` error on an edit) comes back as a normal response
for the caller to inspect:

.. code-block:: python

    try:
        result = bot.edit({'title': 'Sandbox', 'text': 'hi',
                           'token': bot.get_edit_token()})
    except mw.TransportError as exc:
        print('Wiki unreachable:', exc)
    else:
        if 'error' in result:
            print('Edit refused:', result['error']['code'])

API warnings are emitted with ``warnings.warn`` under a per-module
category, so they can be filtered like any other warning:

.. code-block:: python

    import warnings
    warnings.simplefilter('ignore', mw.WikiWarning.query)
"""

__all__ = [
    'BotError',
    'UnknownActionError',
    'MissingParametersError',
    'TransportError',
    'DecodeError',
    'UnsupportedFormatError',
    'WikiWarning',
]

class _MetaGetattr(type):
    """Metaclass to provide __getattr__ on a class."""
    def __getattr__(cls, name):
        if name.startswith('_'):
            raise AttributeError(name)
        setattr(cls, name, type(name, (cls,), {}))
        return getattr(cls, name)

class BotError(Exception):
    """Base class for everything the client raises itself."""
    pass

class UnknownActionError(BotError, AttributeError):
    """The action is not in the registry. Raised before any request."""
    def __init__(self, action):
        super(UnknownActionError, self).__init__(
            '{!r} is not a valid action'.format(action))
        self.action = action

class MissingParametersError(BotError, ValueError):
    """No parameters were passed to an action that needs some."""
    def __init__(self, action):
        super(MissingParametersError, self).__init__(
            "You didn't pass any params to {!r}".format(action))
        self.action = action

class TransportError(BotError):
    """The HTTP exchange failed: connection error, timeout or a
    non-success status. The ``requests`` exception is chained as
    ``__cause__``; ``status`` is the HTTP status code if one was received.
    """
    def __init__(self, message, url=None, status=None):
        super(TransportError, self).__init__(message)
        self.url = url
        self.status = status

class DecodeError(BotError, ValueError):
    """The response body doesn't parse in the requested format.

    ``raw`` holds the (whitespace-trimmed) body for diagnostics.
    """
    def __init__(self, message, raw, fmt):
        super(DecodeError, self).__init__(message)
        self.raw = raw
        self.format = fmt

class UnsupportedFormatError(BotError, ValueError):
    """There's no decoder for the requested response format."""
    def __init__(self, fmt):
        super(UnsupportedFormatError, self).__init__(
            'no decoder for format {!r}'.format(fmt))
        self.format = fmt

class WikiWarning(UserWarning, metaclass=_MetaGetattr):
    """The API sent a warning in the response.

    ``WikiWarning.<module>`` is a subclass for warnings from that module.
    """
    pass
