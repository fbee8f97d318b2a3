"""Generators – composable random-value producers."""
from mp_datagen.generators.core import ValueGenerator, generator, one
from mp_datagen.generators.booleans import alternating_booleans, booleans
from mp_datagen.generators.numbers import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    doubles,
    doubles_from_fixed_list,
    integers,
    integers_from_fixed_list,
    longs,
    negative_integers,
    positive_doubles,
    positive_integers,
    positive_longs,
    safe_decrement,
    safe_decrement_int,
    safe_increment,
    safe_increment_int,
    small_positive_doubles,
    small_positive_integers,
    small_positive_longs,
)
from mp_datagen.generators.combinators import as_string, from_fixed_list, validated
from mp_datagen.generators.binary import binary, byte_arrays
from mp_datagen.generators.enums import enum_values_of
from mp_datagen.generators.strings import (
    alphabetic_string,
    alphanumeric_string,
    hexadecimal_string,
    strings,
    strings_from_fixed_list,
    uuids,
)
from mp_datagen.generators import dates, times
from mp_datagen.generators.collections import (
    collection_sizes,
    from_list,
    list_of,
    lists,
    map_of,
    maps,
    set_of,
    sets,
)
from mp_datagen.generators.people import (
    adult_ages,
    ages,
    child_ages,
    names,
    phone_number_strings,
    phone_numbers,
)
from mp_datagen.generators.network import (
    emails,
    http_urls,
    https_urls,
    ip4_addresses,
    popular_email_domains,
    ports,
    urls_with_scheme,
)
from mp_datagen.generators.places import latitudes, longitudes

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "LONG_MAX",
    "LONG_MIN",
    "ValueGenerator",
    "adult_ages",
    "ages",
    "alphabetic_string",
    "alphanumeric_string",
    "alternating_booleans",
    "as_string",
    "binary",
    "booleans",
    "byte_arrays",
    "child_ages",
    "collection_sizes",
    "dates",
    "doubles",
    "doubles_from_fixed_list",
    "emails",
    "enum_values_of",
    "from_fixed_list",
    "from_list",
    "generator",
    "hexadecimal_string",
    "http_urls",
    "https_urls",
    "integers",
    "integers_from_fixed_list",
    "ip4_addresses",
    "latitudes",
    "list_of",
    "lists",
    "longitudes",
    "longs",
    "map_of",
    "maps",
    "names",
    "negative_integers",
    "one",
    "phone_number_strings",
    "phone_numbers",
    "popular_email_domains",
    "ports",
    "positive_doubles",
    "positive_integers",
    "positive_longs",
    "safe_decrement",
    "safe_decrement_int",
    "safe_increment",
    "safe_increment_int",
    "set_of",
    "sets",
    "small_positive_doubles",
    "small_positive_integers",
    "small_positive_longs",
    "strings",
    "strings_from_fixed_list",
    "times",
    "urls_with_scheme",
    "uuids",
    "validated",
]
