# Reader for the Scrabble Tournament Word List 2006 DAWG format
# Original code can be found at: https://github.com/fogleman/TWL06

import itertools
import struct
import zlib
from pathlib import Path

END = '$'


class _Dawg(object):
    def __init__(self, data):
        data = zlib.decompress(data)
        self.data = data
    def _get_record(self, index):
        a = index * 4
        b = index * 4 + 4
        if b > len(self.data):
            return (False, None, 0)
        x = struct.unpack('<I', self.data[a:b])[0]
        more = bool(x & 0x80000000)
        letter = chr((x >> 24) & 0x7f)
        link = int(x & 0xffffff)
        return (more, letter, link)
    def _get_child(self, index, letter):
        while True:
            more, other, link = self._get_record(index)
            if other == letter:
                return link
            if not more:
                return None
            index += 1
    def __contains__(self, word):
        index = 0
        for letter in itertools.chain(word, END):
            index = self._get_child(index, letter)
            if index is None:
                return False
        return True


def load_dawg(path):
    '''
    Load a zlib-compressed TWL06 DAWG file.
    Raises OSError if the file cannot be read and ValueError if it is not
    valid zlib data.
    '''
    try:
        return _Dawg(Path(path).read_bytes())
    except zlib.error as e:
        raise ValueError(f"not a DAWG file: {e}") from e
