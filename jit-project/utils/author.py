# What it does: Holds the identity and timestamp that get embedded into a commit as its author and committer lines

import re
from collections import namedtuple
from datetime import datetime, timedelta, timezone

AUTHOR_RE = re.compile(r'^(?P<name>.*) <(?P<email>[^>]*)> (?P<ts>-?\d+) (?P<tz>[+-]\d{4})$')


class Author(namedtuple('Author', ['name', 'email', 'time'])):
    __slots__ = ()

    @classmethod
    def now(cls, name, email): # Captures the local time with its UTC offset
        return cls(name, email, datetime.now().astimezone())

    @classmethod
    def parse(cls, line):
        """
        Parses `Name <email> 1700000000 +0200` back into an Author whose time
        carries the recorded UTC offset.
        """
        match = AUTHOR_RE.match(line)
        if not match:
            raise ValueError(f"Malformed author line: {line!r}")

        tz = match.group('tz')
        sign = -1 if tz[0] == '-' else 1
        offset = timedelta(hours=int(tz[1:3]), minutes=int(tz[3:5])) * sign
        when = datetime.fromtimestamp(int(match.group('ts')), timezone(offset))
        return cls(match.group('name'), match.group('email'), when)

    @property
    def timestamp(self):
        return int(self.time.timestamp())

    @property
    def offset(self):
        return self.time.strftime('%z') or '+0000'

    def to_bytes(self):
        return f"{self.name} <{self.email}> {self.timestamp} {self.offset}".encode()
