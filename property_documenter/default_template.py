"""Built-in Markdown template for the generated properties document."""

DEFAULT_TEMPLATE_VERSION = "1"

DEFAULT_MD_TEMPLATE = """\
# Application configuration properties

This document describes your custom configuration properties.
Each property can be specified inside `application.yml`, env variable or as command line switches.

Other configuration related to Spring Boot can be found in the [official documentation](https://docs.spring.io/spring-boot/docs/current/reference/html/application-properties.html#appendix.application-properties), see also Spring Boot's [relaxed binding](https://docs.spring.io/spring-boot/docs/current/reference/html/features.html#features.external-config.typesafe-configuration-properties.relaxed-binding).

## Configuration groups:

{% for group in groups %}
- [`{{ group.name }}`](#{{ group.name | slug }}) : {{ group.description | md_cell }}
{% endfor %}
{% for section in properties %}

## `{{ section.key }}`

Properties for group: `{{ section.key }}`

| Name | Description | Default value | Deprecated |
| ---- | ---- |---- |---- |
{% for property in section.value %}
| `{{ property.name }}` | {{ property.description | md_cell }} | `{{ property.defaultValue | md_cell }}` | {% if property.deprecation %}true{% endif %} |
{% endfor %}

{% endfor %}
"""
