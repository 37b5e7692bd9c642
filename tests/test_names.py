"""
Tests for full name parsing and validation.
"""

import pytest
from ember_owner.core.names import (
    is_valid_full_name,
    make_full_name,
    parse_full_name,
    type_of,
    validate_full_name,
)
from ember_owner.core.exceptions import InvalidFullNameError


class TestFullNames:
    """Test full name helpers."""
    
    @pytest.mark.parametrize('name', ['service:session', 'route:posts/index', 'template:components/x-foo'])
    def test_valid_names(self, name):
        assert is_valid_full_name(name) is True
        assert validate_full_name(name) == name
    
    @pytest.mark.parametrize('name', ['session', ':session', 'service:', 'a:b:c', '', None, 42])
    def test_invalid_names(self, name):
        assert is_valid_full_name(name) is False
        with pytest.raises(InvalidFullNameError):
            validate_full_name(name)
    
    def test_parse_full_name(self):
        """Test splitting into type and name."""
        assert parse_full_name('service:session') == ('service', 'session')
    
    def test_invalid_name_error_carries_name(self):
        with pytest.raises(InvalidFullNameError) as exc_info:
            parse_full_name('session')
        assert exc_info.value.full_name == 'session'
        assert isinstance(exc_info.value, ValueError)
    
    def test_type_of(self):
        assert type_of('model:comment') == 'model'
    
    def test_make_full_name(self):
        assert make_full_name('service', 'store') == 'service:store'
        with pytest.raises(InvalidFullNameError):
            make_full_name('service', '')
