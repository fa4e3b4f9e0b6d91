# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import copy
import json
import logging
import threading
from abc import ABC, abstractmethod
from uuid import uuid4

from errors import StorageFailure, UnknownAttributeError

logger = logging.getLogger(__name__)


class Record:
    """
    A record under construction. Attribute names are checked against the
    bundle's declared attributes; nothing reaches the store until save().
    """

    def __init__(self, store, record_type, bundle, allowed_attributes):
        self.store = store
        self.record_type = record_type
        self.bundle = bundle
        self.allowed_attributes = frozenset(allowed_attributes)
        self.attributes = {}
        self.id = None
        self.url = None

    @property
    def is_saved(self):
        return self.id is not None

    def set_attribute(self, name, value):
        if name not in self.allowed_attributes:
            raise UnknownAttributeError("{} is not an attribute of bundle {}".format(name, self.bundle))
        self.attributes[name] = value
        return self

    def save(self):
        if self.is_saved:
            raise StorageFailure("Record {} has already been saved".format(self.id))
        try:
            (self.id, self.url) = self.store.save(self)
        except StorageFailure:
            raise
        except Exception as e:
            raise StorageFailure("Unable to save {!r}".format(self)) from e
        return (self.id, self.url)

    def to_json(self):
        return {"id": self.id, "type": self.record_type, "bundle": self.bundle,
                "attributes": dict(self.attributes)}

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, json.dumps(self.to_json(), default=str))


class RecordStore(ABC):
    """
    Storage for created records. Concrete stores decide where records
    live and how their identifiers and URLs are minted.
    """

    @abstractmethod
    def create_record(self, record_type, bundle, allowed_attributes):
        """
        Return a new, unsaved Record bound to a bundle.
        """

    @abstractmethod
    def save(self, record):
        """
        Persist a Record and return its (id, url). Failures are raised
        as StorageFailure.
        """

    @abstractmethod
    def get(self, record_type, id):
        """
        Return the JSON description of a saved record, or None.
        """


class MemoryRecordStore(RecordStore):
    def __init__(self, base_url="http://localhost:5000"):
        self.base_url = base_url.rstrip("/")
        self.db = {}
        self._lock = threading.Lock()

    def new_id(self):
        return str(uuid4())

    def url_for(self, record_type, id):
        return "{base}/{record_type}/{id}".format(base=self.base_url, record_type=record_type, id=id)

    def create_record(self, record_type, bundle, allowed_attributes):
        return Record(self, record_type, bundle, allowed_attributes)

    def save(self, record):
        id = self.new_id()
        url = self.url_for(record.record_type, id)
        with self._lock:
            self.db[(record.record_type, id)] = {"id": id, "type": record.record_type,
                                                 "bundle": record.bundle,
                                                 "attributes": copy.deepcopy(record.attributes)}
        logger.debug("Stored %s.%s record %s", record.record_type, record.bundle, id)
        return (id, url)

    def get(self, record_type, id):
        with self._lock:
            found = self.db.get((record_type, id))
            return copy.deepcopy(found) if found else None

    def __len__(self):
        return len(self.db)
