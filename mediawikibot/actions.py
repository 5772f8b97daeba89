"""
mediawikibot.actions - the registry of API actions the client accepts,
and how each of them has to be submitted.

When the wiki grows a new action, adding its name to ``ACTIONS`` (and to
the policy sets below if it needs special treatment) is all it takes for
``Bot.call`` and ``Bot.<action>`` to accept it.
"""
from collections import namedtuple

from .excs import UnknownActionError

__all__ = [
    'ACTIONS',
    'MULTIPART_ACTIONS',
    'XML_ACTIONS',
    'PARAMLESS_ACTIONS',
    'Policy',
    'policy',
]

ACTIONS = frozenset((
    'login', 'logout', 'createaccount', 'query', 'expandtemplates', 'parse',
    'opensearch', 'feedcontributions', 'feedrecentchanges', 'feedwatchlist',
    'help', 'paraminfo', 'rsd', 'compare', 'tokens', 'purge',
    'setnotificationtimestamp', 'rollback', 'delete', 'undelete', 'protect',
    'block', 'unblock', 'move', 'edit', 'upload', 'filerevert', 'emailuser',
    'watch', 'patrol', 'import', 'userrights', 'revisiondelete', 'smwinfo',
))

#: submitted as multipart/form-data (they carry files)
MULTIPART_ACTIONS = frozenset(('upload', 'import'))

#: only answered in XML, whatever format is asked for
XML_ACTIONS = frozenset((
    'opensearch', 'feedcontributions', 'feedrecentchanges',
    'feedwatchlist', 'rsd',
))

#: may be called with no parameters at all
PARAMLESS_ACTIONS = frozenset(('login', 'logout', 'rsd'))

Policy = namedtuple('Policy', 'multipart xml_only params_optional')

def policy(action):
    """Return the encoding Policy of ``action``.

    Raises UnknownActionError if the action isn't registered.
    """
    if action not in ACTIONS:
        raise UnknownActionError(action)
    return Policy(
        multipart=action in MULTIPART_ACTIONS,
        xml_only=action in XML_ACTIONS,
        params_optional=action in PARAMLESS_ACTIONS,
    )
