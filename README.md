# serverswitch

`serverswitch` points installed ZennoLab products at a different server. It
changes the `address` attribute of every self-closing `<endpoint .../>` element
in a product's `<exe>.exe.config` file so that the URL uses the chosen host.
Text outside those elements is copied unchanged. Before it changes a file, it
saves a backup copy of that file.

The package uses only the standard library.

## Installation

```
pip install serverswitch
```

To run the tests, install the `test` extra (`pip install serverswitch[test]`)
and run `pytest`.

## Servers

`serverswitch.selection.SERVERS` lists the known servers. They are numbered
from 1:

1. `userarea.zenno.io`
2. `userarea.zennolab.com`
3. `userarea-us.zennolab.com`
4. `userarea-hk.zennolab.com`

## Errors

When an operation cannot be completed, the package raises
`serverswitch.products.SwitchError`.

## Products

`serverswitch.products.Product` is a frozen dataclass that describes one
installed product. It has these fields:

- `name`
- `ver`
- `lang`
- `install_path` (converted to a `Path`)
- `exe_names` (converted to a tuple)

`Product.backup_name(orig_name)` returns the backup file name
`"<orig_name>.<name> <ver> <lang>.bak"`.

```python
from serverswitch.products import Product

product = Product("ZennoPoster", "7.7.0", "EN", r"C:\Program Files\ZennoPoster", ["ZennoPoster"])
product.backup_name("ZennoPoster.exe.config")
# "ZennoPoster.exe.config.ZennoPoster 7.7.0 EN.bak"
```

## Choosing a server

`select_server(server_index=None, stdin=None, stdout=None)` is in
`serverswitch.selection`.

- If you pass a number from 1 to 4, it returns that server's domain.
- Any other number raises `SwitchError`.
- If you pass `None`, it prints the numbered list and reads a line from
  `stdin`. Only the first character of the line is used, and it must be a
  valid server number.
- It allows three attempts. After three incorrect answers it raises
  `SwitchError("Exceeded number of input attempts.")`.
- `stdin` and `stdout` default to `sys.stdin` and `sys.stdout`.

```python
from serverswitch.selection import select_server

select_server(2)   # "userarea.zennolab.com"
```

## Rewriting addresses

These functions are in `serverswitch.switcher`.

### `replace_host(url, server_domain)`

Returns `url` with its host replaced by `server_domain`. The user information,
path, query and fragment are kept.

For `http`, `https`, `ws`, `wss`, `ftp` and `file` URLs:

- The scheme and the new host are lower-cased.
- A default port is dropped.
- An empty path becomes `/`.

A relative URL raises `SwitchError`, and so does a URL that has no host.

```python
from serverswitch.switcher import replace_host

replace_host("https://userarea.zenno.io/api/service", "userarea-us.zennolab.com")
# "https://userarea-us.zennolab.com/api/service"
```

### `rewrite_endpoints(xml_text, server_domain)`

Returns the XML text with every self-closing `endpoint` element rewritten. In
each one, the attribute named `address` (with or without a namespace prefix)
gets the new host.

The element's attributes are written back with double quotes. Everything else
is returned exactly as it was.

`SwitchError` is raised for:

- malformed markup
- mismatched end tags
- malformed or duplicated attributes

### `switch_server(path, server_domain, stdout=None)`

Reads the UTF-8 file at `path`, rewrites it in place with
`rewrite_endpoints`, and reports its progress to `stdout`.

## Backups

`serverswitch.backup.create_backup(data, orig_name, backup_dir, product, stdout=None)`
writes `data` to `backup_dir / product.backup_name(orig_name)` and returns that
path.

If the file already exists, it is left untouched and reported.

## Processing products

`serverswitch.app.run(products, backup_dir, server_index=None, stdin=None, stdout=None)`
first picks the server with `select_server`. Then, for each product and each
of its `exe_names`, it does the following:

- Opens `config_path(product.install_path, "<exe>.exe.config")`, which is
  `<install_path>/Progs/<exe>.exe.config`. If the file cannot be opened, it is
  reported on `stdout` and skipped.
- Backs the file up into `backup_dir`.
- Switches the server in the file.

`run` returns the chosen domain.

When `server_index` is `None`, it prints "Complete." at the end and waits for
a line on `stdin` ("Press Enter to close.").

```python
from serverswitch.app import run

run([product], ".", server_index=3)
```

## What the package does not do

- It does not discover installed products. You build the `Product` objects
  yourself and pass them to `run`.
- It does not install a console command. Call `run` from your own code.