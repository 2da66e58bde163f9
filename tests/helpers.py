"""In-memory stand-ins and source-file helpers shared by the test modules."""

import copy

HEADER = (
    "resource,listOfLatLong,tame,listOfLatLong_tame,caveLocation,listOfLatLong_cave"
)


# --- In-memory stand-in for the motor database ---
# Covers the calls the services make: drop/create/rename collections,
# insert_many, find().sort().to_list(), find_one, distinct.


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return self._docs if length is None else self._docs[:length]


class FakeCollection:
    def __init__(self, db, name):
        self.db = db
        self.name = name

    @property
    def docs(self):
        return self.db.collections.get(self.name, [])

    async def insert_many(self, documents, ordered=True):
        self.db.collections.setdefault(self.name, []).extend(copy.deepcopy(documents))

    def find(self, filter=None, projection=None):
        docs = [d for d in self.docs if _matches(d, filter)]
        return FakeCursor(copy.deepcopy(docs))

    async def find_one(self, filter=None, projection=None):
        for doc in self.docs:
            if _matches(doc, filter):
                doc = dict(doc)
                if projection and projection.get("_id") == 0:
                    doc.pop("_id", None)
                return doc
        return None

    async def distinct(self, key):
        seen = []
        for doc in self.docs:
            if doc[key] not in seen:
                seen.append(doc[key])
        return seen

    async def rename(self, new_name, dropTarget=False):
        self.db.renames.append((self.name, new_name))
        self.db.collections[new_name] = self.db.collections.pop(self.name)


class FakeDatabase:
    def __init__(self):
        self.collections: dict[str, list[dict]] = {}
        self.renames: list[tuple[str, str]] = []

    def __getitem__(self, name):
        return FakeCollection(self, name)

    async def drop_collection(self, name):
        self.collections.pop(name, None)

    async def create_collection(self, name):
        self.collections[name] = []
        return FakeCollection(self, name)


def _matches(doc, filter):
    return all(doc.get(k) == v for k, v in (filter or {}).items())


def write_source(data_dir, map_id, rows, header=HEADER):
    """Write data_dir/{map_id}.csv from a header line and row lines."""
    path = data_dir / f"{map_id}.csv"
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path

