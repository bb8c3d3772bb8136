from .indexed_dict import IndexedDict
from .views import IndexedItemsView, IndexedKeysView, IndexedValuesView, PairList, ReadOnlyIndexedDict
