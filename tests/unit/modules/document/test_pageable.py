from swaggerconf.modules.document import PAGEABLE_PARAMETERS, pageable_parameters


def test_pageable_parameters():
    parameters = pageable_parameters()

    assert [parameter.name for parameter in parameters] == ["page", "size", "sort"]
    assert all(parameter.parameter_in == "query" for parameter in parameters)
    sort = parameters[2]
    assert sort.type == "array"
    assert sort.items == "string"
    assert sort.allow_multiple is True


def test_pageable_parameters_returns_a_copy():
    parameters = pageable_parameters()
    parameters.clear()

    assert len(PAGEABLE_PARAMETERS) == 3
