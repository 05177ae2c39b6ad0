# Copyright 2026 The pyrepo Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""pyrepo Data — specifications and collections over pluggable data sources.

Application code describes *what* to read or change with a
:class:`Specification` and hands it to a :class:`Collection`. *How* entities
are stored is the business of a :class:`DataSource` adapter, and a
:class:`DataSourceServant` translates between entities and the plain
mappings a data source stores.
"""

from pyrepo.data.collection import Collection, ImmutableCollection
from pyrepo.data.condition import Condition, ConditionType, Direction, Order
from pyrepo.data.entity_context import EntityContext
from pyrepo.data.errors import CollectionFault, FaultKind
from pyrepo.data.messages import FaultMessageRenderer
from pyrepo.data.ports.inbound import MutableCollection, QueryableCollection
from pyrepo.data.ports.outbound import DataSource, DataSourceServant, ReadonlyDataSource
from pyrepo.data.properties import CollectionProperties
from pyrepo.data.servant import DataclassServant, PydanticServant
from pyrepo.data.specification import Specification

__all__ = [
    # Query model
    "Condition",
    "ConditionType",
    "Direction",
    "Order",
    "Specification",
    # Ports
    "DataSource",
    "DataSourceServant",
    "EntityContext",
    "MutableCollection",
    "QueryableCollection",
    "ReadonlyDataSource",
    # Collections
    "Collection",
    "CollectionProperties",
    "ImmutableCollection",
    # Servants
    "DataclassServant",
    "PydanticServant",
    # Faults
    "CollectionFault",
    "FaultKind",
    "FaultMessageRenderer",
]
