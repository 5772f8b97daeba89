from os import path
from setuptools import setup
from re import match, S

with open(path.join('mediawikibot', '__init__.py'), 'r') as f:
    contents = f.read()
    longdesc = match('^"""(.*?)"""', contents, S).group(1)
    version = match(r'[\s\S]*__version__[^\'"]+[\'"]([^\'"]+)[\'"]', contents).group(1)
    del contents

setup(
    name="mediawikibot",
    version=version,
    description="A generic MediaWiki action API bot.",
    long_description=longdesc,
    long_description_content_type="text/x-rst",
    author="Ken Hilton",
    license="MIT",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Wiki',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='mediawiki api requests bot',
    packages=["mediawikibot"],
    install_requires=['requests'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
)
