# rosestore

Building blocks for a Redis-like key-value store, in plain Python with no
third-party dependencies: the on-disk record format and data files, the
persisted meta and expiry information, an ordered skip list index, and
in-memory hash, set, list and sorted set structures.

## Modules

- `rosestore.entry`: `Entry` (key, value, extra, data type, mark) with
  `size()` and `encode()`. A record is a 20-byte big-endian header (CRC-32 of
  the value, key/value/extra sizes, data type, mark) followed by key, value and
  extra. `encode()` raises `InvalidEntryError` for an empty key.
  `decode_header(buf)` returns the six header fields. `DataType` numbers the
  kinds of value: `STRING`, `LIST`, `HASH`, `SET`, `ZSET`. Errors derive from
  `StorageError`; `InvalidCrcError` signals a checksum mismatch.
- `rosestore.db_file`: `DBFile`, one data file of one data type, named like
  `000000000.data.str` (`db_file_name(data_type, file_id)`). It is read and
  written through standard file I/O or a memory map (`FileRWMethod.FILE_IO`,
  `FileRWMethod.MMAP`); in mmap mode the file is truncated to the block size.
  `write(entry)` appends at `offset` and advances it (`EmptyEntryError` for an
  empty key), `read(offset)` returns the `Entry` there (`EOFError` past the end
  of a file, `InvalidCrcError` on a bad checksum), plus `sync()`,
  `close(sync)` and use as a context manager. `build(path, method, block_size)`
  scans a directory and returns, per data type, the opened archived files keyed
  by id and the id of the highest-numbered (active) file, which it does not open.
- `rosestore.meta`: `DBMeta` holding `active_write_off`, the write offset of the
  active file per data type; `DBMeta.store(path)` writes it as JSON and
  `load_meta(path)` reads it back, giving an empty meta when the file is missing
  or unreadable.
- `rosestore.expires`: `save_expires(expires, path)` and `load_expires(path)`
  keep a `{key: deadline}` dictionary in a compact binary file; a missing file
  loads as an empty dictionary.
- `rosestore.skiplist`: `SkipList`, unique byte keys kept in order, with
  `put`, `get`, `exist`, `remove`, `front`, `foreach(fn)` (stops when `fn`
  returns False), `find_prefix(prefix)` (first element whose key is not below
  `prefix`, or the front element if there is none), `len()` and iteration over
  `Element` objects (`key`, `value`, `next`). `Indexer` records where an entry
  lives: `meta`, `file_id`, `entry_size`, `offset`.
- `rosestore.ds.hash`: `Hash` with `hset`, `hsetnx`, `hget`, `hgetall`
  (a list of `(field, value)` pairs), `hdel`, `hexists`, `hlen`, `hkeys`,
  `hvals`.
- `rosestore.ds.set`: `Set` with `sadd`, `spop`, `sismember`, `srandmember`,
  `srem`, `smove`, `scard`, `smembers`, `sunion`, `sdiff`.
- `rosestore.ds.list`: `List` with `lpush`, `rpush`, `lpop`, `rpop`, `lindex`,
  `lrem`, `linsert` (`InsertOption.BEFORE` / `AFTER`), `lset`, `lrange`,
  `ltrim`, `llen`, `lkey_exists`, `lval_exists`.
- `rosestore.ds.zset`: `SortedSet` with `zadd`, `zscore`, `zcard`, `zrank`,
  `zrevrank`, `zincrby`, `zrange`, `zrange_with_scores`, `zrevrange`,
  `zrevrange_with_scores`, `zrem`, `zget_by_rank`, `zrevget_by_rank`,
  `zscore_range`, `zrevscore_range`. Members are ordered by score, then by
  name; lookups of absent members return `None`.
- `rosestore.utils`: `exists`, `copy_dir`, `copy_file`, `float_to_str` and
  `str_to_float`.

## Install

```
pip install .
```

## Examples

```python
from rosestore.ds.hash import Hash
from rosestore.ds.zset import SortedSet

h = Hash()
h.hset("my_hash", "field1", b"Coding")
h.hget("my_hash", "field1")        # b"Coding"

z = SortedSet()
z.zadd("langs", 12.1, "PHP")
z.zadd("langs", 34.23, "Java")
z.zadd("langs", 23.5, "Python")
z.zrange("langs", 0, -1)           # ["PHP", "Python", "Java"]
```

```python
import os

from rosestore.db_file import DBFile, FileRWMethod
from rosestore.entry import DataType, Entry

os.makedirs("/tmp/store", exist_ok=True)
with DBFile("/tmp/store", 0, FileRWMethod.FILE_IO, 8 * 1024 * 1024, DataType.STRING) as df:
    df.write(Entry(b"key", b"value", b"", DataType.STRING, 0))
    df.read(0).value               # b"value"
```

## What it does not do

There is no database object here that opens a directory, replays the data
files into the in-memory structures, rotates full files, expires keys or
reclaims space, and there is no server or command-line program. The modules
supply the record format, files, index and data structures such a store is
built from.

## Tests

```
pip install ".[test]"
pytest
```