from textwrap import dedent

# Generated code refers only to names bound by ``ClassDefinition`` under the
# ``_synthwire_`` prefix, so base member names never shadow them.

CLASS_TEMPLATE = dedent(
    """
    class {{ class_name }}(_synthwire_base_type):
        __doc__ = _synthwire_base_type.__doc__
        __synthwire_base__ = _synthwire_base_type
    {% for member_block in member_blocks %}

    {{ member_block }}
    {% endfor %}
    """,
).strip()

CONSTRUCTOR_TEMPLATE = dedent(
    """
    def __init__({{ parameters }}) -> None:
        _synthwire_super({{ class_name }}, {{ instance_name }}).__init__({{ arguments }})
    """,
).strip()

OVERLOAD_CONSTRUCTOR_TEMPLATE = dedent(
    """
    @_synthwire_overload
    def __init__({{ parameters }}) -> None: ...
    """,
).strip()

FORWARDING_CONSTRUCTOR_TEMPLATE = dedent(
    """
    def __init__(self, *args: _synthwire_any, **kwargs: _synthwire_any) -> None:
        _synthwire_super({{ class_name }}, self).__init__(*args, **kwargs)
    """,
).strip()

NO_CONSTRUCTOR_TEMPLATE = dedent(
    """
    @_synthwire_private_constructor
    def __init__(self, *args: _synthwire_any, **kwargs: _synthwire_any) -> None:
        raise _synthwire_constructor_not_found_error(_synthwire_constructor_not_found_message)
    """,
).strip()

CAPABILITY_TEMPLATE = dedent(
    """
    __{{ slot_name }} = None

    @_synthwire_property
    def {{ accessor_name }}(self) -> _synthwire_service_container_type:
        container = self.__{{ slot_name }}
        if container is None:
            container = _synthwire_service_container_factory(self)
            _synthwire_object_setattr(self, "{{ slot_attribute }}", container)
        return container
    """,
).strip()

PROPERTY_TEMPLATE = dedent(
    """
    def _synthwire_get_{{ index }}(self) -> _synthwire_intercepted_{{ index }}_type:
        return self.{{ accessor_name }}.{{ get_service_name }}(
            _synthwire_intercepted_{{ index }}_type,
            {{ key_expression }},
            _synthwire_intercepted_{{ index }}_default,
        )

    _synthwire_get_{{ index }}.__name__ = _synthwire_intercepted_{{ index }}_name
    {{ name }} = _synthwire_property(
        _synthwire_get_{{ index }},
        _synthwire_intercepted_{{ index }}.fset,
        _synthwire_intercepted_{{ index }}.fdel,
        _synthwire_intercepted_{{ index }}.__doc__,
    )
    del _synthwire_get_{{ index }}
    """,
).strip()
