"""
A generic MediaWiki API bot.

Every action the MediaWiki action API offers can be called as a method
taking a dict of parameters; the bot takes care of logging in, fetching
edit tokens, choosing the response format and encoding the request.

Requires the ``requests`` library.

http://www.mediawiki.org/

Installation
============

To install the latest development version::

    pip install -e .

Example Usage
=============

.. code-block:: python

    import mediawikibot as mw

Log in:

.. code-block:: python

    bot = mw.Bot("https://en.wikipedia.org/w/api.php",
                 "Kenny2wiki", password,
                 user_agent="MyCoolBot/0.0.0")

    result = bot.login()
    if result['login']['result'] != 'Success':
        print('Login failed:', result['login'])

Parse some wikitext:

.. code-block:: python

    html = bot.parse({'text': '==Heading 2=='})['parse']['text']['*']

Edit a page:

.. code-block:: python

    bot.edit({
        'title': 'User:Kenny2wiki/sandbox',
        'appendtext': '\\n This is a test!',
        'summary': 'Made a test edit',
        'token': bot.get_edit_token(),
    })

Upload a file (sent as multipart/form-data automatically):

.. code-block:: python

    with open('Example.png', 'rb') as fobj:
        bot.upload({'filename': 'Example.png', 'file': fobj,
                    'token': bot.get_edit_token()})

Feeds and opensearch only answer in XML, and come back parsed:

.. code-block:: python

    doc = bot.opensearch({'search': 'Python'})
    for item in doc.value.iter('{http://opensearch.org/searchsuggest2}Text'):
        print(item.text)

Trace requests and responses:

.. code-block:: python

    import logging
    logging.basicConfig(level=logging.DEBUG)
    bot.set_debug(True)


MIT Licensed.
"""
import logging

__version__ = '1.0.0'

from .bot import Bot
from .actions import ACTIONS, policy
from .codec import DecodedValue, Mapping, JsonValue, XmlDocument, Text
from .excs import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Bot',
    'ACTIONS',
    'policy',
    'DecodedValue',
    'Mapping',
    'JsonValue',
    'XmlDocument',
    'Text',
    'BotError',
    'UnknownActionError',
    'MissingParametersError',
    'TransportError',
    'DecodeError',
    'UnsupportedFormatError',
    'WikiWarning',
]
