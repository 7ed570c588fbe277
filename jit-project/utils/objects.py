# What it does: Defines the three kinds of objects the database stores (blobs, trees and commits) and their canonical byte form
# How it does: Every object frames its payload as `<type> <length>\0<payload>`. The database hashes exactly these bytes, so an object's id is a pure function of its content
# What data structure it uses: A Merkle Tree (a tree's bytes embed the ids of its children, which must be sealed before the parent can be serialized)

import stat
from collections import namedtuple

from .author import Author
from .hexcodec import decode_hex, encode_hex

REGULAR_MODE = '100644'
EXECUTABLE_MODE = '100755'
DIRECTORY_MODE = '40000'

OID_BYTES = 20


class GitObject:
    type = None

    def __init__(self):
        self._oid = None

    @property
    def oid(self): # None until the database has stored the object
        return self._oid

    @property
    def is_sealed(self):
        return self._oid is not None

    def seal(self, oid): # Assigns the object id; this is the only mutation allowed after construction
        if self._oid is not None and self._oid != oid:
            raise ValueError(f"{self.type} already sealed as {self._oid}, refusing to reseal as {oid}")
        self._oid = oid

    def payload(self):
        raise NotImplementedError

    def to_bytes(self):
        payload = self.payload()
        return f'{self.type} {len(payload)}\0'.encode() + payload


class Blob(GitObject):
    type = 'blob'

    def __init__(self, data):
        super().__init__()
        self.data = data.encode() if isinstance(data, str) else bytes(data)

    def payload(self):
        return self.data

    @classmethod
    def parse(cls, payload):
        return cls(payload)


class Entry(namedtuple('Entry', ['name', 'oid', 'mode'])):
    # mode holds the st_mode bits as reported by stat
    __slots__ = ()

    @property
    def mode_string(self):
        if stat.S_ISDIR(self.mode):
            return DIRECTORY_MODE
        if self.mode & 0o111:
            return EXECUTABLE_MODE
        return REGULAR_MODE

    @property
    def is_tree(self):
        return stat.S_ISDIR(self.mode)


def _name_key(name):
    return name.encode('utf-8', 'surrogateescape')


class Tree(GitObject):
    type = 'tree'

    def __init__(self, entries=()):
        super().__init__()
        self.entries = {}
        for entry in entries:
            self.entries[entry.name] = entry

    @classmethod
    def build(cls, entries):
        """
        Builds a tree hierarchy from flat `(relative_path, oid, mode)` triples.
        Paths use '/' as separator; every directory component becomes a nested Tree.
        """
        root = cls()
        for path, oid, mode in entries:
            *parents, name = path.split('/')
            root._add_entry(parents, Entry(name, oid, mode))
        return root

    def _add_entry(self, parents, entry):
        if self.is_sealed:
            raise ValueError("cannot add entries to a sealed tree")
        if not parents:
            self.entries[entry.name] = entry
            return
        subtree = self.entries.get(parents[0])
        if not isinstance(subtree, Tree):
            subtree = self.entries[parents[0]] = Tree()
        subtree._add_entry(parents[1:], entry)

    def traverse(self, visit): # Post-order walk: children are visited before their parent
        for child in self.entries.values():
            if isinstance(child, Tree):
                child.traverse(visit)
        visit(self)

    def sorted_entries(self): # Returns (name, child) pairs in ascending byte order of name
        return sorted(self.entries.items(), key=lambda item: _name_key(item[0]))

    def payload(self):
        out = bytearray()
        for name, child in self.sorted_entries():
            if isinstance(child, Tree):
                if not child.is_sealed:
                    raise ValueError(f"subtree '{name}' must be stored before its parent")
                mode, oid = DIRECTORY_MODE, child.oid
            else:
                mode, oid = child.mode_string, child.oid
            out += f'{mode} '.encode() + _name_key(name) + b'\0' + decode_hex(oid)
        return bytes(out)

    @classmethod
    def parse(cls, payload):
        entries = []
        pos = 0
        while pos < len(payload):
            space = payload.index(b' ', pos)
            null = payload.index(b'\0', space)
            mode = int(payload[pos:space].decode(), 8)
            name = payload[space + 1:null].decode('utf-8', 'surrogateescape')
            raw_oid = payload[null + 1:null + 1 + OID_BYTES]
            if len(raw_oid) != OID_BYTES:
                raise ValueError(f"truncated tree entry '{name}'")
            entries.append(Entry(name, encode_hex(raw_oid), mode))
            pos = null + 1 + OID_BYTES
        return cls(entries)


class Commit(GitObject):
    type = 'commit'

    def __init__(self, tree_oid, author, message, parent=None):
        super().__init__()
        self.tree_oid = tree_oid
        self.author = author
        self.message = message
        self.parent = parent

    @property
    def title(self): # First line of the message
        lines = self.message.splitlines()
        return lines[0] if lines else ''

    def payload(self):
        author = self.author.to_bytes()
        lines = [f'tree {self.tree_oid}'.encode()]
        if self.parent:
            lines.append(f'parent {self.parent}'.encode())
        lines.append(b'author ' + author)
        lines.append(b'committer ' + author)
        lines.append(b'')
        lines.append(self.message.encode())
        return b'\n'.join(lines)

    @classmethod
    def parse(cls, payload):
        header, _, message = payload.partition(b'\n\n')
        fields = {}
        for line in header.decode().splitlines():
            key, _, value = line.partition(' ')
            fields.setdefault(key, value)

        if 'tree' not in fields or 'author' not in fields:
            raise ValueError("commit is missing its tree or author header")

        return cls(
            fields['tree'],
            Author.parse(fields['author']),
            message.decode(),
            parent=fields.get('parent'),
        )


TYPES = {cls.type: cls for cls in (Blob, Tree, Commit)}

def parse_object(obj_type, payload): # Rebuilds an in-memory object from its stored type and payload
    try:
        cls = TYPES[obj_type]
    except KeyError:
        raise ValueError(f"Unknown object type: {obj_type}")
    return cls.parse(payload)
