# *-* coding: utf-8 *-*
__author__ = 'Qoorp'
__license__ = 'MIT'
__version__ = '0.1.0'

__all__ = ['encoding', 'errors', 'generic', 'objects', 'reader', 'traverse', 'update', 'writer']
