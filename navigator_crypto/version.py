"""Navigator Crypto Meta information.
   Navigator Crypto encrypts short values with AES-256-GCM and lets
   encrypted and plain values live side by side.
"""
__title__ = 'navigator_crypto'
__description__ = (
   'Navigator Crypto provides AES-256-GCM envelopes for configuration '
   'values and stored fields.'
)
__version__ = '0.1.0'
__copyright__ = 'Copyright (c) 2023 Jesus Lara'
__author__ = 'Jesus Lara'
__author_email__ = 'jesuslarag@gmail.com'
__license__ = 'Apache-2.0'
__url__ = 'https://github.com/phenobarbital/navigator-crypto'
