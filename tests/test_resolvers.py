"""
Tests for resolvers.

Tests capability detection, MappingResolver and NamespaceResolver.
"""

import types
import pytest
from unittest.mock import Mock
from ember_owner.core.interfaces import Resolver
from ember_owner.resolvers import (
    BaseResolver,
    MappingResolver,
    NamespaceResolver,
    ResolverCapabilities,
    classify,
    dasherize,
)


class UserSessionService:
    pass


class StoreService:
    pass


class PostsIndexRoute:
    pass


class Application:
    pass


def make_namespace():
    return types.SimpleNamespace(
        UserSessionService=UserSessionService,
        StoreService=StoreService,
        PostsIndexRoute=PostsIndexRoute,
        Application=Application,
        helper=lambda: None,
    )


class TestCapabilities:
    """Test ResolverCapabilities detection."""
    
    def test_none_has_no_capabilities(self):
        assert ResolverCapabilities.of(None) == ResolverCapabilities()
        assert list(ResolverCapabilities.of(None)) == []
    
    def test_resolve_only(self):
        capabilities = ResolverCapabilities.of(Mock(spec=['resolve']))
        
        assert not any([
            capabilities.known_for_type,
            capabilities.lookup_description,
            capabilities.make_to_string,
            capabilities.normalize,
        ])
    
    def test_non_callable_attribute_is_not_a_capability(self):
        class Odd:
            normalize = 'nope'
            
            def resolve(self, full_name):
                return None
        
        assert ResolverCapabilities.of(Odd()).normalize is False
    
    def test_namespace_resolver_has_everything(self):
        capabilities = NamespaceResolver(make_namespace()).capabilities
        
        assert list(capabilities) == ['known_for_type', 'lookup_description', 'make_to_string', 'normalize']
    
    def test_protocol(self):
        assert isinstance(MappingResolver(), Resolver)
        assert isinstance(Mock(spec=['resolve']), Resolver)
        assert not isinstance(object(), Resolver)
    
    def test_base_resolver_is_abstract(self):
        with pytest.raises(TypeError):
            BaseResolver()


class TestMappingResolver:
    """Test MappingResolver."""
    
    def setup_method(self):
        self.resolver = MappingResolver({
            'service:session': UserSessionService,
            'service:store': StoreService,
            'route:index': PostsIndexRoute,
        })
    
    def test_resolve(self):
        assert self.resolver.resolve('service:session') is UserSessionService
    
    def test_unknown_name_returns_none(self):
        assert self.resolver.resolve('service:nonexistent') is None
    
    def test_malformed_name_returns_none(self):
        assert self.resolver.resolve('session') is None
        assert self.resolver.resolve(None) is None
    
    def test_known_for_type(self):
        assert self.resolver.known_for_type('service') == {
            'service:session': True,
            'service:store': True,
        }
        assert self.resolver.known_for_type('template') == {}
    
    def test_add(self):
        self.resolver.add('service:extra', StoreService)
        
        assert self.resolver.resolve('service:extra') is StoreService
        assert len(self.resolver) == 4


class TestNamingHelpers:
    """Test classify and dasherize."""
    
    @pytest.mark.parametrize('name,expected', [
        ('session', 'Session'),
        ('user-session', 'UserSession'),
        ('user_session', 'UserSession'),
        ('userSession', 'UserSession'),
        ('posts/index', 'PostsIndex'),
        ('posts.index', 'PostsIndex'),
    ])
    def test_classify(self, name, expected):
        assert classify(name) == expected
    
    @pytest.mark.parametrize('name,expected', [
        ('userSession', 'user-session'),
        ('user_session', 'user-session'),
        ('UserSession', 'user-session'),
        ('posts/index', 'posts/index'),
    ])
    def test_dasherize(self, name, expected):
        assert dasherize(name) == expected


class TestNamespaceResolver:
    """Test NamespaceResolver conventions."""
    
    def setup_method(self):
        self.resolver = NamespaceResolver(make_namespace(), name='App')
    
    def test_resolve_by_convention(self):
        assert self.resolver.resolve('service:user-session') is UserSessionService
        assert self.resolver.resolve('service:store') is StoreService
        assert self.resolver.resolve('route:posts/index') is PostsIndexRoute
    
    def test_main_entry(self):
        assert self.resolver.resolve('application:main') is Application
    
    def test_unknown_and_malformed_names(self):
        assert self.resolver.resolve('service:nonexistent') is None
        assert self.resolver.resolve('service') is None
        assert self.resolver.resolve('a:b:c') is None
    
    def test_normalize(self):
        assert self.resolver.normalize('service:userSession') == 'service:user-session'
        assert self.resolver.normalize('service:user_session') == 'service:user-session'
        assert self.resolver.normalize('route:posts.index') == 'route:posts/index'
        assert self.resolver.normalize('component:posts.index') == 'component:posts.index'
        assert self.resolver.normalize('broken') == 'broken'
    
    def test_known_for_type(self):
        assert self.resolver.known_for_type('service') == {
            'service:user-session': True,
            'service:store': True,
        }
        assert self.resolver.known_for_type('application') == {'application:main': True}
        assert self.resolver.known_for_type('helper') == {}
    
    def test_lookup_description(self):
        assert self.resolver.lookup_description('service:user-session') == 'App.UserSessionService'
        assert self.resolver.lookup_description('broken') == 'broken'
    
    def test_make_to_string(self):
        assert self.resolver.make_to_string(StoreService, 'service:store') == 'App.StoreService'
    
    def test_mapping_namespace(self):
        resolver = NamespaceResolver({'StoreService': StoreService})
        
        assert resolver.resolve('service:store') is StoreService
        assert resolver.known_for_type('service') == {'service:store': True}
        assert resolver.lookup_description('service:store') == 'namespace.StoreService'

    def test_known_for_type_skips_keys_that_are_not_names(self):
        resolver = NamespaceResolver({'StoreService': StoreService, 'Bad:KeyService': StoreService})

        assert resolver.known_for_type('service') == {'service:store': True}

    def test_module_namespace(self):
        module = types.ModuleType('myapp')
        module.StoreService = StoreService
        resolver = NamespaceResolver(module)
        
        assert resolver.resolve('service:store') is StoreService
        assert resolver.lookup_description('service:store') == 'myapp.StoreService'
