"""
Tests for the registry.

Tests registration, resolution order, caching, options and fallbacks.
"""

import pytest
from unittest.mock import Mock
from ember_owner.core.cache import ResolutionCache
from ember_owner.core.exceptions import InvalidFullNameError, RegistrationError
from ember_owner.core.factory import RegisterOptions
from ember_owner.core.registry import Registry
from ember_owner.resolvers import MappingResolver


class Session:
    pass


class Store:
    pass


def make_resolver(**factories):
    """Resolver mock with only `resolve`, backed by a dict."""
    resolver = Mock(spec=['resolve'])
    resolver.resolve.side_effect = lambda name: factories.get(name)
    return resolver


class TestRegistration:
    """Test register and unregister."""
    
    def setup_method(self):
        self.registry = Registry(cache=ResolutionCache())
    
    def test_register_and_resolve(self):
        self.registry.register('service:session', Session)
        
        assert self.registry.resolve('service:session') is Session
        assert self.registry.has('service:session')
    
    def test_unknown_name_resolves_to_none(self):
        assert self.registry.resolve('service:nonexistent') is None
        assert self.registry.has('service:nonexistent') is False
    
    def test_register_invalid_name(self):
        with pytest.raises(InvalidFullNameError):
            self.registry.register('session', Session)
    
    def test_register_none_factory(self):
        with pytest.raises(RegistrationError) as exc_info:
            self.registry.register('service:session', None)
        assert 'unknown factory' in str(exc_info.value)
        assert exc_info.value.full_name == 'service:session'
    
    def test_cannot_reregister_after_resolution(self):
        self.registry.register('service:session', Session)
        self.registry.resolve('service:session')
        
        with pytest.raises(RegistrationError) as exc_info:
            self.registry.register('service:session', Store)
        assert 'already been resolved' in str(exc_info.value)
    
    def test_reregister_before_resolution(self):
        self.registry.register('service:session', Session)
        self.registry.register('service:session', Store)
        
        assert self.registry.resolve('service:session') is Store
    
    def test_register_after_miss(self):
        """A cached miss does not hide a later registration."""
        assert self.registry.resolve('service:session') is None
        
        self.registry.register('service:session', Session)
        
        assert self.registry.resolve('service:session') is Session
    
    def test_unregister(self):
        self.registry.register('service:session', Session, {'singleton': False})
        self.registry.resolve('service:session')
        
        self.registry.unregister('service:session')
        
        assert self.registry.resolve('service:session') is None
        assert self.registry.get_options('service:session') is None
        self.registry.register('service:session', Store)
        assert self.registry.resolve('service:session') is Store
    
    def test_has_invalid_name(self):
        assert self.registry.has('session') is False
        assert self.registry.has(None) is False
    
    def test_plain_values_can_be_registered(self):
        self.registry.register('config:api-url', 'https://example.com', {'instantiate': False})
        
        assert self.registry.resolve('config:api-url') == 'https://example.com'


class TestResolution:
    """Test resolver interaction and caching."""
    
    def test_resolver_wins_over_registrations(self):
        registry = Registry(resolver=make_resolver(**{'service:session': Session}), cache=ResolutionCache())
        registry.register('service:session', Store)
        
        assert registry.resolve('service:session') is Session
    
    def test_registrations_used_when_resolver_misses(self):
        registry = Registry(resolver=make_resolver(), cache=ResolutionCache())
        registry.register('service:store', Store)
        
        assert registry.resolve('service:store') is Store
    
    def test_hits_are_cached(self):
        resolver = make_resolver(**{'service:session': Session})
        registry = Registry(resolver=resolver, cache=ResolutionCache())
        
        registry.resolve('service:session')
        registry.resolve('service:session')
        
        assert resolver.resolve.call_count == 1
    
    def test_misses_are_cached(self):
        resolver = make_resolver()
        registry = Registry(resolver=resolver, cache=ResolutionCache())
        
        assert registry.resolve('service:nonexistent') is None
        assert registry.resolve('service:nonexistent') is None
        
        assert resolver.resolve.call_count == 1
    
    def test_disabled_cache_asks_resolver_every_time(self):
        resolver = make_resolver(**{'service:session': Session})
        registry = Registry(resolver=resolver, cache=ResolutionCache(enabled=False))
        
        registry.resolve('service:session')
        registry.resolve('service:session')
        
        assert resolver.resolve.call_count == 2
    
    def test_resolver_errors_propagate(self):
        resolver = Mock(spec=['resolve'])
        resolver.resolve.side_effect = RuntimeError("broken resolver")
        registry = Registry(resolver=resolver, cache=ResolutionCache())
        
        with pytest.raises(RuntimeError):
            registry.resolve('service:session')


class TestNaming:
    """Test normalize, describe and make_to_string."""
    
    def test_normalize_without_resolver(self):
        registry = Registry()
        assert registry.normalize('service:userSession') == 'service:userSession'
    
    def test_normalize_uses_resolver_and_memoizes(self):
        resolver = Mock(spec=['resolve', 'normalize'])
        resolver.normalize.side_effect = lambda name: name.lower()
        registry = Registry(resolver=resolver, cache=ResolutionCache())
        
        assert registry.normalize('service:Session') == 'service:session'
        assert registry.normalize('service:Session') == 'service:session'
        assert resolver.normalize.call_count == 1
    
    def test_register_uses_normalized_name(self):
        resolver = Mock(spec=['resolve', 'normalize'])
        resolver.resolve.return_value = None
        resolver.normalize.side_effect = lambda name: name.lower()
        registry = Registry(resolver=resolver, cache=ResolutionCache())
        
        registry.register('service:Session', Session)
        
        assert registry.resolve('service:session') is Session
        assert 'service:session' in registry.registrations
    
    def test_describe(self):
        assert Registry().describe('service:session') == 'service:session'
        
        resolver = Mock(spec=['resolve', 'lookup_description'])
        resolver.lookup_description.return_value = 'App.SessionService'
        assert Registry(resolver=resolver).describe('service:session') == 'App.SessionService'
    
    def test_make_to_string_defaults(self):
        registry = Registry()
        
        assert registry.make_to_string(Session, 'service:session') == 'Session'
        assert registry.make_to_string('literal', 'config:x') == 'literal'
        assert registry.make_to_string(object(), 'service:x') == '(unknown class)'
    
    def test_make_to_string_uses_resolver(self):
        resolver = Mock(spec=['resolve', 'make_to_string'])
        resolver.make_to_string.return_value = 'App.SessionService'
        
        assert Registry(resolver=resolver).make_to_string(Session, 'service:session') == 'App.SessionService'
    
    def test_capabilities_detected_once(self):
        registry = Registry(resolver=Mock(spec=['resolve', 'normalize']))
        
        assert registry.capabilities.normalize is True
        assert registry.capabilities.known_for_type is False


class TestOptions:
    """Test per-name and per-type options."""
    
    def setup_method(self):
        self.registry = Registry(cache=ResolutionCache())
    
    def test_register_stores_options(self):
        self.registry.register('model:comment', Session, {'singleton': False})
        
        assert self.registry.get_options('model:comment') == RegisterOptions(singleton=False)
        assert self.registry.get_option('model:comment', 'singleton') is False
        assert self.registry.get_option('model:comment', 'instantiate') is None
    
    def test_type_options(self):
        self.registry.options_for_type('model', {'singleton': False})
        
        assert self.registry.get_options_for_type('model') == RegisterOptions(singleton=False)
        assert self.registry.get_option('model:comment', 'singleton') is False
        assert self.registry.get_option('service:session', 'singleton') is None
    
    def test_name_options_win_over_type_options(self):
        self.registry.options_for_type('model', {'singleton': False})
        self.registry.options('model:settings', {'singleton': True})
        
        assert self.registry.get_option('model:settings', 'singleton') is True
    
    def test_unset_name_option_falls_through_to_type(self):
        self.registry.options_for_type('model', {'instantiate': False})
        self.registry.register('model:comment', Session, {'singleton': False})
        
        assert self.registry.get_option('model:comment', 'instantiate') is False


class TestFallback:
    """Test fallback registries."""
    
    def setup_method(self):
        self.parent = Registry(cache=ResolutionCache())
        self.child = Registry(fallback=self.parent, cache=ResolutionCache())
    
    def test_resolve_falls_back(self):
        self.parent.register('service:session', Session)
        
        assert self.child.resolve('service:session') is Session
        assert self.child.has('service:session')
    
    def test_child_registration_shadows_parent(self):
        self.parent.register('service:session', Session)
        self.child.register('service:session', Store)
        
        assert self.child.resolve('service:session') is Store
        assert self.parent.resolve('service:session') is Session
    
    def test_options_fall_back(self):
        self.parent.options_for_type('model', {'singleton': False})
        self.parent.options('service:session', {'instantiate': False})
        
        assert self.child.get_options_for_type('model') == RegisterOptions(singleton=False)
        assert self.child.get_options('service:session') == RegisterOptions(instantiate=False)
        assert self.child.get_option('model:comment', 'singleton') is False
    
    def test_known_for_type_merges(self):
        resolver = MappingResolver({'service:from-resolver': Store, 'route:index': Session})
        child = Registry(resolver=resolver, fallback=self.parent, cache=ResolutionCache())
        self.parent.register('service:from-parent', Session)
        child.register('service:local', Session)
        child.register('route:posts', Session)
        
        assert child.known_for_type('service') == {
            'service:from-parent': True,
            'service:local': True,
            'service:from-resolver': True,
        }
    
    def test_describe_falls_back(self):
        resolver = Mock(spec=['resolve', 'lookup_description'])
        resolver.lookup_description.return_value = 'described'
        child = Registry(fallback=Registry(resolver=resolver))
        
        assert child.describe('service:session') == 'described'
