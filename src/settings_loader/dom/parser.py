# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/22 01:20:44
# @Author : Kariko Lin

"""XML settings loaders.

The document looks like this (the prefix is up to you, the namespace isn't):

    ```xml
    <s:settings xmlns:s="http://github.com/superruzafa/settings-loader"
                key1="foo">
        <key2>{{ key1 }}bar</key2>
        <s:settings key1="value1" />
    </s:settings>
    ```

and loads as `[{key1: foo, key2: foobar}, {key1: value1, key2: value1bar}]`.
"""

import logging
from xml.dom import minidom
from xml.parsers.expat import ExpatError

import chardet

from ..abstract import FileHandler, Loader
from ..context import Context, Interpolator, Reporter
from ..walker import ScopeWalker
from .model import DomNode

logger = logging.getLogger(__name__)


class InvalidSettingsDocument(Exception):
    """Raised when the XML itself cannot be parsed."""
    pass


def parse_document(xml: str | bytes) -> minidom.Document:
    try:
        return minidom.parseString(xml)
    except ExpatError as e:
        raise InvalidSettingsDocument(
            f'Malformed settings document: {e}') from e


class XmlLoader(Loader):
    def __init__(
        self, document: minidom.Document | None,
        report: Reporter | None = None
    ) -> None:
        self._document = document
        self._walker = ScopeWalker(Interpolator(report))
        self._settings: list[Context] = []

    @staticmethod
    def from_string(
        xml: str | bytes, report: Reporter | None = None
    ) -> 'XmlLoader':
        # always a plain XmlLoader, subclasses may need more than a document.
        return XmlLoader(parse_document(xml), report)

    def get_settings(self) -> list[Context]:
        return list(self._settings)

    def load(self) -> bool:
        self._settings = []
        if self._document is None:
            # constructed without a document
            return False
        self._settings = self._walker.walk(DomNode(self._document))
        logger.debug('%d settings scope(s) loaded.', len(self._settings))
        return True


class XmlFileLoader(XmlLoader, FileHandler[minidom.Document]):
    """Loads settings from an XML file, re-reading it on every `load()`."""

    def __init__(
        self, filename: str,
        encoding: str | None = None,
        report: Reporter | None = None
    ) -> None:
        XmlLoader.__init__(self, None, report)
        FileHandler.__init__(self, filename)
        self._codec = encoding

    @staticmethod
    def _decode_file(filename: str) -> str | bytes:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            # let expat follow the XML declaration (UTF-8 if absent).
            return raw

        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            return raw

    def read(self) -> minidom.Document:
        """Parse the file given to this loader.

        Without an explicit encoding the bytes go straight to expat,
        which honours `<?xml ... encoding="..."?>`.
        Decoding failures with an explicit encoding fall back to
        guessing the codec by `chardet`, then to the declaration.
        """
        if self._codec is None:
            with open(self._fn, 'rb') as fp:
                return parse_document(fp.read())
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                buf = fp.read()
        except UnicodeDecodeError:
            logger.info('Cannot decode %s as %s, guessing its codec.',
                        self._fn, self._codec)
            buf = self._decode_file(self._fn)
        return parse_document(buf)

    def load(self) -> bool:
        self._settings = []
        self._document = self.read()
        return super().load()

    def __str__(self) -> str:
        return "XML settings: " + super().__str__() + f"({self._codec})"
