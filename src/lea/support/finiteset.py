"""
An implementation of a finite set with stable, indexable enumeration order.
"""


class FiniteSetIndexError(IndexError):
    """
    Exception raised when ``FiniteSet.element_at()`` is called with an index
    outside of ``0 <= i < size()``.

    Attributes:
        index (int): The offending index.
        size (int): The size of the set at the time of the call.
    """

    def __init__(self, index, size):
        """
        Initialize a new instance of FiniteSetIndexError.

        Args:
            index (int): The offending index.
            size (int): The size of the set.
        """
        super().__init__(f"Index {index} out of range for a set of size {size}")
        self.index = index
        self.size = size


class FiniteSet:
    """
    Implements an unordered collection of unique elements that still
    enumerates its elements in a stable order (the order of insertion).

    >>> fs = FiniteSet([3, 1, 2])
    >>> fs
    <FiniteSet {3, 1, 2}>
    >>> fs.element_at(0)
    3

    FiniteSet supports the set algebra operations | (union), & (intersection)
    and - (difference) between itself and another FiniteSet or any iterable
    of elements, along with in-place variants.

    >>> str(fs | [4, 1])
    '{3, 1, 2, 4}'

    Comparisons are defined by double inclusion, never by the enumeration
    order, so two sets built in different orders compare equal.

    >>> FiniteSet([1, 2]) == FiniteSet([2, 1])
    True
    >>> FiniteSet([1]) < FiniteSet([2, 1])
    True

    Elements must be hashable. A FiniteSet is mutable and therefore not
    hashable itself; use ``frozen()`` to get a canonical key.
    """

    __hash__ = None

    def __init__(self, source=None):
        """
        Initializes a FiniteSet object.

        Args:
            source (iterable, optional): Elements to insert. Duplicates are
                ignored. Defaults to None.
        """
        self._items = []
        self._members = set()

        if source is not None:
            self.update(source)

    @staticmethod
    def _coerce(other):
        if isinstance(other, FiniteSet):
            return other
        return FiniteSet(other)

    # Basic access

    def size(self):
        """
        Returns the number of elements in the set.
        """
        return len(self._items)

    def __len__(self):
        return len(self._items)

    def contains(self, x):
        """
        Checks if an element is contained in the set.

        Args:
            x: The element to look for.

        Returns:
            bool: True if x is in the set, False otherwise.
        """
        return x in self._members

    def __contains__(self, x):
        return x in self._members

    def element_at(self, i):
        """
        Returns the element at position i in the enumeration order.

        Args:
            i (int): An index between 0 and ``size() - 1``.

        Returns:
            The element at that position.

        Raises:
            FiniteSetIndexError: If i is outside of ``0 <= i < size()``.
        """
        if not 0 <= i < len(self._items):
            raise FiniteSetIndexError(i, len(self._items))
        return self._items[i]

    def __iter__(self):
        return iter(self._items)

    def __bool__(self):
        return bool(self._items)

    def is_empty(self):
        return not self._items

    def copy(self):
        """
        Returns a shallow copy of the set, keeping the enumeration order.
        """
        fs = FiniteSet()
        fs._items = list(self._items)
        fs._members = set(self._members)
        return fs

    def frozen(self):
        """
        Returns the elements as a frozenset. Two sets that compare equal
        always have equal frozen keys.
        """
        return frozenset(self._members)

    def add(self, x):
        """
        Inserts x into the set. Inserting an element already present does
        nothing.
        """
        if x not in self._members:
            self._members.add(x)
            self._items.append(x)

    def discard(self, x):
        """
        Removes x from the set if it is present.
        """
        if x in self._members:
            self._members.remove(x)
            self._items.remove(x)

    # In-place algebra

    def update(self, other):
        """
        Inserts all elements of other into the set (in-place union).

        Args:
            other (iterable): The elements to insert.

        Returns:
            FiniteSet: This set.
        """
        add = self.add
        for x in other:
            add(x)
        return self

    def intersection_update(self, other):
        """
        Removes from the set all elements that are not in other.

        Args:
            other (iterable): The elements to keep.

        Returns:
            FiniteSet: This set.
        """
        other = self._coerce(other)
        self._items = [x for x in self._items if other.contains(x)]
        self._members = set(self._items)
        return self

    def difference_update(self, other):
        """
        Removes from the set all elements that are in other.

        Args:
            other (iterable): The elements to remove.

        Returns:
            FiniteSet: This set.
        """
        other = self._coerce(other)
        self._items = [x for x in self._items if not other.contains(x)]
        self._members = set(self._items)
        return self

    def __ior__(self, other):
        return self.update(other)

    def __iand__(self, other):
        return self.intersection_update(other)

    def __isub__(self, other):
        return self.difference_update(other)

    # Pure algebra

    def union(self, other):
        """
        Returns a new set with the elements of this set followed by the
        elements of other that are not already in it.
        """
        return self.copy().update(other)

    def intersection(self, other):
        """
        Returns a new set with the elements of this set that are also in
        other, in this set's order.
        """
        return self.copy().intersection_update(other)

    def difference(self, other):
        """
        Returns a new set with the elements of this set that are not in
        other, in this set's order.
        """
        return self.copy().difference_update(other)

    def isdisjoint(self, other):
        """
        Returns True if this set and other have no element in common.
        """
        other = self._coerce(other)
        return not any(other.contains(x) for x in self._items)

    def __or__(self, other):
        return self.union(other)

    def __and__(self, other):
        return self.intersection(other)

    def __sub__(self, other):
        return self.difference(other)

    # Comparison

    def subset_or_equal(self, other):
        """
        Checks whether every element of this set is contained in other.

        Every other comparison is derived from this one.

        Args:
            other (FiniteSet): The set to compare with.

        Returns:
            bool: True if this set is included into, or equal to, other.
        """
        return all(other.contains(x) for x in self._items)

    def equal(self, other):
        return self.subset_or_equal(other) and other.subset_or_equal(self)

    def not_equal(self, other):
        return not self.equal(other)

    def superset_or_equal(self, other):
        return other.subset_or_equal(self)

    def strict_subset(self, other):
        return self.subset_or_equal(other) and not other.subset_or_equal(self)

    def strict_superset(self, other):
        return other.strict_subset(self)

    def __eq__(self, other):
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other):
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self.not_equal(other)

    def __le__(self, other):
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self.subset_or_equal(other)

    def __ge__(self, other):
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self.superset_or_equal(other)

    def __lt__(self, other):
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self.strict_subset(other)

    def __gt__(self, other):
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self.strict_superset(other)

    # Display

    def __str__(self):
        return "{" + ", ".join(str(x) for x in self._items) + "}"

    def __repr__(self):
        return f"<FiniteSet {self.__str__()}>"
