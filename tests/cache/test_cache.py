import copy
import pytest
from bluecache import Cache, ABSENT, OrderedMapProtocol

ENTRIES = [('first', 'foo'), ('second', 'bar'), ('third', 'baz')]


@pytest.fixture
def cache():
    """A fresh three-entry cache per test."""
    return Cache(ENTRIES)


@pytest.fixture
def empty_cache():
    return Cache()


class TestConstruction:

    def test_from_pairs_keeps_order(self, cache):
        assert list(cache.entries()) == ENTRIES
        assert list(cache) == ['first', 'second', 'third']
        assert list(cache.values()) == ['foo', 'bar', 'baz']

    def test_from_mapping_and_other_cache(self, cache):
        assert list(Cache(dict(ENTRIES)).entries()) == ENTRIES
        copied = Cache(cache)
        assert list(copied.entries()) == ENTRIES
        copied.delete('first')
        assert 'first' in cache

    def test_reset_keeps_position(self, cache):
        cache.set('first', 'qux')
        assert list(cache.entries()) == [('first', 'qux'), ('second', 'bar'), ('third', 'baz')]

    def test_map_style_helpers(self, cache):
        assert cache.size == 3
        assert len(cache) == 3
        assert cache.has('second')
        assert not cache.has('fourth')
        assert cache.get('second') == 'bar'
        assert cache.get('fourth') is None
        assert cache.set('fourth', 'biz') is cache
        assert cache['fourth'] == 'biz'
        assert cache.delete('fourth') is True
        assert cache.delete('fourth') is False
        assert cache.clear() is cache
        assert cache.size == 0

    def test_satisfies_ordered_map_protocol(self, cache):
        assert isinstance(cache, OrderedMapProtocol)

    def test_repr(self):
        assert repr(Cache([(1, 'a')])) == "Cache([(1, 'a')])"


class TestPositional:

    def test_first(self, cache):
        assert cache.first == ('first', 'foo')
        assert cache.first_key == 'first'
        assert cache.first_value == 'foo'

    def test_last(self, cache):
        assert cache.last == ('third', 'baz')
        assert cache.last_key == 'third'
        assert cache.last_value == 'baz'

    @pytest.mark.parametrize("accessor", ['first', 'first_key', 'first_value', 'last', 'last_key', 'last_value'])
    def test_empty_cache_returns_none(self, empty_cache, accessor):
        assert getattr(empty_cache, accessor) is None

    def test_numeric_keys(self):
        numbers = Cache([(1, 'foo'), (2, 'bar'), (3, 'baz')])
        assert numbers.first == (1, 'foo')
        assert numbers.last == (3, 'baz')


class TestFind:

    def test_find_entry(self, cache):
        assert cache.find(lambda value, key, _: value == 'bar' and key == 'second') == ('second', 'bar')

    def test_find_nothing_returns_absent(self, cache, empty_cache):
        assert cache.find(lambda *_: False) is ABSENT
        assert empty_cache.find(lambda *_: True) is ABSENT

    def test_find_key_and_value(self, cache):
        assert cache.find_key(lambda value, key, _: value == 'bar') == 'second'
        assert cache.find_value(lambda value, key, _: key == 'second') == 'bar'
        assert cache.find_key(lambda *_: False) is ABSENT
        assert cache.find_value(lambda *_: False) is ABSENT

    def test_absent_is_distinct_from_stored_none(self):
        holder = Cache([('empty', None)])
        assert holder.find_value(lambda value, key, _: key == 'empty') is None
        assert holder.find_value(lambda value, key, _: key == 'missing') is ABSENT
        assert not ABSENT

    def test_callback_receives_container(self, cache):
        seen = []
        cache.find(lambda value, key, container: seen.append(container))
        assert all(container is cache for container in seen)
        assert len(seen) == 3

    def test_find_with_bound_receiver(self, cache):
        class Matcher:
            wanted = 'second'

        def predicate(self, value, key, container):
            return key == self.wanted

        assert cache.find(predicate, Matcher()) == ('second', 'bar')
        assert cache.find_key(predicate, Matcher()) == 'second'
        assert cache.find_value(predicate, Matcher()) == 'bar'

    def test_non_callable_predicate_raises(self, cache):
        with pytest.raises(TypeError):
            cache.find('not callable')


class TestEqualsAndClone:

    def test_equal_caches(self, cache):
        assert Cache(ENTRIES).equals(cache)
        assert Cache(ENTRIES) == cache

    def test_unequal_caches(self, cache, empty_cache):
        assert not cache.equals(empty_cache)
        assert not cache.equals(Cache([('first', 'foo'), ('second', 'bar'), ('third', 'qux')]))

    def test_order_matters(self, cache):
        assert not cache.equals(Cache(reversed(ENTRIES)))

    def test_equality_against_plain_dict_ignores_order(self, cache):
        assert cache == dict(reversed(ENTRIES))

    def test_clone_is_equal_and_independent(self, cache):
        clone = cache.clone()
        assert clone.equals(cache)
        assert clone is not cache
        clone.set('fourth', 'biz')
        clone.delete('first')
        assert list(cache.entries()) == ENTRIES

    def test_clone_shares_values_by_reference(self):
        payload = {'n': 1}
        original = Cache([('a', payload)])
        assert original.clone()['a'] is payload

    def test_copy_module_uses_clone(self, cache):
        copied = copy.copy(cache)
        assert isinstance(copied, Cache)
        assert copied.equals(cache)

    def test_unhashable(self, cache):
        with pytest.raises(TypeError):
            hash(cache)


class TestSweepAndFilter:

    def test_sweep_removes_in_place(self, cache):
        swept = cache.sweep(lambda value, key, _: value == 'baz')
        assert swept == 1
        assert list(cache.entries()) == [('first', 'foo'), ('second', 'bar')]

    def test_sweep_leaves_no_match(self, cache):
        predicate = lambda value, key, _: value.startswith('ba')
        assert cache.sweep(predicate) == 2
        assert not cache.some(predicate)

    def test_sweep_everything(self, cache):
        assert cache.sweep(lambda *_: True) == 3
        assert cache.size == 0

    def test_sweep_with_bound_receiver(self, cache):
        assert cache.sweep(lambda self, value, key, _: key in self, Cache([('third', None)])) == 1
        assert list(cache) == ['first', 'second']

    def test_filter_returns_new_cache(self, cache):
        filtered = cache.filter(lambda value, key, _: value == 'foo')
        assert isinstance(filtered, Cache)
        assert list(filtered.entries()) == [('first', 'foo')]
        assert list(cache.entries()) == ENTRIES

    def test_filter_with_bound_receiver(self, cache):
        filtered = cache.filter(lambda self, value, key, _: value in self, {'bar', 'baz'})
        assert list(filtered) == ['second', 'third']


class TestTransforms:

    def test_map(self, cache):
        assert cache.map(lambda value, key, _: value) == ['foo', 'bar', 'baz']
        assert cache.map(lambda value, key, _: f'{key}={value}') == ['first=foo', 'second=bar', 'third=baz']

    def test_map_with_bound_receiver(self, cache):
        assert cache.map(lambda self, value, key, _: self + value, '>') == ['>foo', '>bar', '>baz']

    def test_some(self, cache, empty_cache):
        assert cache.some(lambda value, key, _: value == 'foo')
        assert not cache.some(lambda *_: False)
        assert not empty_cache.some(lambda *_: True)

    def test_some_short_circuits(self, cache):
        calls = []
        cache.some(lambda value, key, _: calls.append(key) or True)
        assert calls == ['first']

    def test_every_short_circuits(self, cache):
        calls = []
        assert not cache.every(lambda value, key, _: calls.append(key) or key == 'second')
        assert calls == ['first']

    def test_every(self, cache, empty_cache):
        assert cache.every(lambda value, key, _: len(value) > 2)
        assert not cache.every(lambda *_: False)
        assert empty_cache.every(lambda *_: False)

    def test_reduce(self, cache):
        assert cache.reduce(lambda acc, value, key, _: f'{acc}{value}', '') == 'foobarbaz'

    def test_reduce_empty_returns_initial(self, empty_cache):
        assert empty_cache.reduce(lambda acc, value, key, _: acc + 1, 10) == 10

    def test_reduce_with_bound_receiver(self, cache):
        assert cache.reduce(lambda self, acc, value, key, _: acc + self, 0, 2) == 6

    def test_for_each(self, cache):
        output = []
        cache.for_each(lambda *args: output.append(args))
        assert output == [('foo', 'first', cache), ('bar', 'second', cache), ('baz', 'third', cache)]


class TestConcat:

    def test_concat_two_caches(self, cache):
        joined = cache.concat(Cache([('forth', 'biz'), ('fifth', 'buzz')]))
        assert list(joined.entries()) == ENTRIES + [('forth', 'biz'), ('fifth', 'buzz')]
        assert list(cache.entries()) == ENTRIES

    def test_concat_many_and_plain_inputs(self, cache):
        joined = cache.concat({'forth': 'biz'}, [('fifth', 'buzz')])
        assert list(joined) == ['first', 'second', 'third', 'forth', 'fifth']

    def test_repeated_key_keeps_first_position_and_last_value(self, cache):
        joined = cache.concat(Cache([('first', 'one')]), Cache([('first', 'uno'), ('forth', 'biz')]))
        assert list(joined.entries()) == [('first', 'uno'), ('second', 'bar'), ('third', 'baz'), ('forth', 'biz')]

    def test_concat_nothing_is_a_clone(self, cache):
        joined = cache.concat()
        assert joined.equals(cache)
        assert joined is not cache


class TestSort:
    SORTED = [('second', 'bar'), ('third', 'baz'), ('first', 'foo')]

    def test_sort_in_place(self, cache):
        assert list(cache.sort().entries()) == self.SORTED
        assert list(cache.entries()) == self.SORTED

    def test_sorted_leaves_receiver(self, cache):
        result = cache.sorted()
        assert result is not cache
        assert list(result.entries()) == self.SORTED
        assert list(cache.entries()) == ENTRIES

    def test_sort_with_comparator(self, cache):
        by_key_desc = lambda va, vb, ka, kb: (ka < kb) - (ka > kb)
        assert list(cache.sort(by_key_desc)) == ['third', 'second', 'first']

    def test_sort_is_stable(self):
        ties = Cache([('b', 1), ('a', 1), ('c', 0)])
        assert list(ties.sort()) == ['c', 'b', 'a']

    def test_sort_empty(self, empty_cache):
        assert empty_cache.sort() is empty_cache
        assert empty_cache.size == 0

    def test_sorted_with_comparator(self, cache):
        by_key_desc = lambda va, vb, ka, kb: (ka < kb) - (ka > kb)
        result = cache.sorted(by_key_desc)
        assert list(result) == ['third', 'second', 'first']
        assert list(cache.entries()) == ENTRIES

    def test_default_sort_orders_mixed_values(self):
        mixed = Cache([('a', 1), ('b', None), ('c', 'x')])
        assert list(mixed.sorted()) == ['b', 'a', 'c']
        assert list(mixed) == ['a', 'b', 'c']
        assert list(mixed.sort()) == ['b', 'a', 'c']

    def test_default_sort_keeps_native_order_within_a_type(self):
        numbers = Cache([('a', 10), ('b', None), ('c', 2), ('d', 2.5)])
        assert list(numbers.sort()) == ['b', 'c', 'd', 'a']


class TestPlainCallbackWithContext:
    """A context passed to a (value, key, container) callback leaves its shape alone."""

    CONTEXT = object()

    def test_find_family(self, cache):
        predicate = lambda value, key, _: key == 'second'
        assert cache.find(predicate, self.CONTEXT) == ('second', 'bar')
        assert cache.find_key(predicate, self.CONTEXT) == 'second'
        assert cache.find_value(predicate, self.CONTEXT) == 'bar'

    def test_filter(self, cache):
        filtered = cache.filter(lambda value, key, _: value == 'foo', self.CONTEXT)
        assert list(filtered.entries()) == [('first', 'foo')]

    def test_map(self, cache):
        assert cache.map(lambda value, key, _: value, self.CONTEXT) == ['foo', 'bar', 'baz']

    def test_some_and_every(self, cache):
        assert cache.some(lambda value, key, _: value == 'foo', self.CONTEXT)
        assert cache.every(lambda value, key, _: len(value) > 2, self.CONTEXT)

    def test_reduce(self, cache):
        assert cache.reduce(lambda acc, value, key, _: f'{acc}{value}', '', self.CONTEXT) == 'foobarbaz'

    def test_sweep(self, cache):
        assert cache.sweep(lambda value, key, _: value == 'baz', self.CONTEXT) == 1
        assert list(cache) == ['first', 'second']

    def test_for_each(self, cache):
        seen = []
        cache.for_each(lambda value, key, container: seen.append((key, container)), self.CONTEXT)
        assert seen == [('first', cache), ('second', cache), ('third', cache)]

    def test_context_may_be_the_cache_itself(self, cache):
        assert cache.find(lambda value, key, _: key == 'second', cache) == ('second', 'bar')
