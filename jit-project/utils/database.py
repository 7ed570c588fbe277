# What it does: Manages the object database, the content-addressed store where every blob, tree and commit lives
# How it does: `store` hashes an object's canonical bytes with SHA-1, seals the id into the object and writes the zlib-compressed bytes to `objects/<2 hex>/<38 hex>`. Each write goes to a uniquely named temp file in the shard first and is then renamed into place, so a reader never sees a partial object
# What data structure it uses: Hash Table / Dictionary (the object directory is a dictionary keyed by SHA-1), sharded by the first two hex digits to keep directories small

import hashlib
import os
import random
import re
import string
import zlib

from .objects import parse_object

TEMP_CHARS = string.ascii_letters + string.digits
TEMP_PREFIX = 'tmp_obj_'
COMPRESSION_LEVEL = 1  # fast
OID_RE = re.compile(r'[0-9a-f]{40}')


class Database:
    def __init__(self, path, rng=None):
        self.path = os.fspath(path)
        self.rng = rng if rng is not None else random.Random()

    def object_path(self, oid):
        if not isinstance(oid, str) or not OID_RE.fullmatch(oid):
            raise ValueError(f"Not a valid object id: {oid!r}")
        return os.path.join(self.path, oid[:2], oid[2:])

    def store(self, obj): # Seals the object's id and persists it; returns the id
        content = obj.to_bytes()
        oid = hashlib.sha1(content).hexdigest()
        obj.seal(oid)
        self.write_object(oid, content)
        return oid

    def write_object(self, oid, content):
        object_path = self.object_path(oid)
        dirname = os.path.dirname(object_path)
        temp_path = os.path.join(dirname, self._generate_temp_name())

        compressed = zlib.compress(content, COMPRESSION_LEVEL)
        try:
            self._write_file(temp_path, compressed)
        except FileNotFoundError:
            # First object in this shard
            try:
                os.mkdir(dirname)
            except FileExistsError:
                pass
            self._write_file(temp_path, compressed)

        # Same content means same bytes, so replacing an existing object is harmless
        os.replace(temp_path, object_path)

    def _write_file(self, path, data):
        with open(path, 'xb') as f:
            f.write(data)

    def _generate_temp_name(self):
        return TEMP_PREFIX + ''.join(self.rng.sample(TEMP_CHARS, 6))

    def exists(self, oid):
        return os.path.isfile(self.object_path(oid))

    def read_object(self, oid): # Reads an object by its id and returns its type and payload
        object_path = self.object_path(oid)
        if not os.path.isfile(object_path):
            raise FileNotFoundError(f"Object not found: {oid}")

        with open(object_path, 'rb') as f:
            compressed = f.read()
        try:
            data = zlib.decompress(compressed)
        except zlib.error as e:
            raise ValueError(f"Object {oid} is corrupt: {e}")

        header, sep, payload = data.partition(b'\0')
        if not sep:
            raise ValueError(f"Object {oid} has no header terminator")
        obj_type, _, size = header.decode().partition(' ')
        if not size.isdigit() or int(size) != len(payload):
            raise ValueError(f"Object {oid} declares length {size!r} but holds {len(payload)} bytes")

        return obj_type, payload

    def load(self, oid): # Reads and parses an object, returning it already sealed with its id
        obj_type, payload = self.read_object(oid)
        obj = parse_object(obj_type, payload)
        obj.seal(oid)
        return obj
