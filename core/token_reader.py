"""core/token_reader.py - 把字符串/流切分成以空格分隔的文本 token"""
import codecs

from config.config import READER_CONFIG
from core.errors import ParseError, ReadError


def _read_chunks(stream, chunk_size):
    while True:
        try:
            chunk = stream.read(chunk_size)
        except UnicodeDecodeError as e:
            raise ParseError(f"cannot decode input: {e}") from e
        except (OSError, ValueError) as e:
            raise ReadError(f"failed to read token source: {e}") from e
        if not chunk:
            return
        yield chunk


def _decode_chunks(chunks, encoding):
    """bytes 块增量解码，多字节字符可能跨块"""
    decoder = None
    for chunk in chunks:
        if isinstance(chunk, str):
            yield chunk
            continue
        if decoder is None:
            decoder = codecs.getincrementaldecoder(encoding)()
        try:
            yield decoder.decode(chunk)
        except UnicodeDecodeError as e:
            raise ParseError(f"cannot decode input: {e}") from e
    if decoder is not None:
        try:
            yield decoder.decode(b'', final=True)
        except UnicodeDecodeError as e:
            raise ParseError(f"cannot decode input: {e}") from e


def _split_chunks(chunks, delimiter):
    # 末尾的空残段不产出，中间的空段照常产出
    pending = ''
    for chunk in chunks:
        pending += chunk
        *complete, pending = pending.split(delimiter)
        yield from complete
    if pending:
        yield pending


def read_tokens(source, delimiter=None, chunk_size=None, encoding=None):
    """
    逐个产出未分类的文本 token
    Args:
        source: str、bytes、可读的文本/二进制流，或 token 字符串的可迭代对象
        delimiter: 分隔符，默认单个空格
        chunk_size: 流式读取块大小
        encoding: bytes 的编码
    Returns:
        token 字符串的生成器
    """
    delimiter = delimiter or READER_CONFIG["delimiter"]
    chunk_size = chunk_size or READER_CONFIG["chunk_size"]
    encoding = encoding or READER_CONFIG["encoding"]

    if isinstance(source, (str, bytes)):
        chunks = [source]
    elif hasattr(source, 'read'):
        chunks = _read_chunks(source, chunk_size)
    else:
        # 已经切好的 token 序列
        items = iter(source)
        while True:
            try:
                item = next(items)
            except StopIteration:
                return
            except OSError as e:
                raise ReadError(f"failed to read token source: {e}") from e
            if isinstance(item, bytes):
                try:
                    item = item.decode(encoding)
                except UnicodeDecodeError as e:
                    raise ParseError(f"cannot decode token: {e}") from e
            yield item
        return

    yield from _split_chunks(_decode_chunks(chunks, encoding), delimiter)
