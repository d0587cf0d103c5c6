# -*- coding: utf-8 -*-

from pfunctional._errors import EmptyCollectionError, EmptySequenceError, StreamReuseError

from pfunctional._option import Option, some, nothing, from_nullable, Unit, unit

from pfunctional._hash_contract import HashContract

from pfunctional._plist import PList, Cons, Nil, NonEmptyPList, plist, l

from pfunctional._phashmap import PHashMap, phashmap, hm

from pfunctional._phashset import PHashSet, phashset, hs

from pfunctional._stream import Stream

from _pfunctional_version import __version__
