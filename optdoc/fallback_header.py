"""Canned preamble used when the existing document has no usable anchors."""

from textwrap import dedent

FALLBACK_HEADER = dedent(
    """\
    # NOTE: THIS DOCUMENT IS CURRENTLY WIP

    **This document does not yet contain all of fuzzy's options, there are a lot of esoteric and
    undocumented options which can be found in issues/discussions and will be added over time.**

    ---

    # Fuzzy Commands and Options

    - [General Usage](#general-usage)
    - [Setup Options](#setup-options)
    - [Global Options](#global-options)
    - [Pickers](#pickers)

    ---

    ## General Usage

    Options can be specified in a few different ways:
    - Global setup options
    - Provider-defaults setup options
    - Provider-specific setup options
    - Command call options

    Most options are applicable in all of the above, a few examples below:

    Global setup, applies to all interfaces:
    ```python
    # Places the floating window at the bottom left corner
    fuzzy.setup(winopts={"row": 1, "col": 0})
    ```

    Disable `file_icons` globally via provider defaults setup options:
    ```python
    fuzzy.setup(defaults={"file_icons": False})
    ```

    Disable `file_icons` in `files` only, applies to this call only:
    ```python
    fuzzy.files(file_icons=False)
    ```

    Nested options can also be set using dotted keys:
    ```python
    fuzzy.files(**{"winopts.split": "belowright new"})
    ```

    ---

    ## Setup Options

    Most options are global, meaning they can be specified in any of the different ways
    explained in [General Usage](#general-usage) and are described in detail in the
    [Global Options](#global-options) section below.

    #### setup.nbsp

    Type: `string`, Default: `nil`

    An invisible unicode character `EN SPACE` (U+2002) is used as text delimiter.

    It is not recommended to modify this value, but if your terminal/font does not support
    `EN_SPACE` you can use `NBSP` (U+00A0) instead:
    ```python
    fuzzy.setup(nbsp="\\xa0")
    ```

    #### setup.winopts.preview.default

    Type: `string|function|object`, Default: `builtin`

    Default previewer for file pickers, possible values `builtin|bat|cat|head`.

    ---

    ## Global Options

    Globals are options that aren't picker-specific and can be used with all commands, for
    example, positioning the floating window at the bottom line using `globals.winopts.row`:

    > The `globals` prefix denotates the scope of the option and is therefore omitted

    ```python
    fuzzy.files(winopts={"row": 1})
    # Using the dotted key format
    fuzzy.files(**{"winopts.row": 1})
    ```"""
).splitlines()
