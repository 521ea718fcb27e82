# imtools

A collection of small helpers for service backends, plus library functions
that start, stop and check a set of service binaries described in a
`start-config.yml` file.

## Installation

```
pip install imtools
```

For running the test suite:

```
pip install "imtools[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `imtools.datautil` | List and mapping helpers: set difference, de-duplication, intersection, pagination, ordering, sorting, field merging |
| `imtools.stringutil` | String/number conversion, alignment, case helpers, e-mail validation, CRC32 hash codes |
| `imtools.jsonutil` | Compact JSON encode/decode raising `JsonError` |
| `imtools.encoding` | Base64 encode/decode raising `DecodeError` |
| `imtools.encrypt` | MD5 digests and AES-CBC encryption with PKCS#7 padding |
| `imtools.timeutil` | Timestamps, day boundaries, time-zone checked cycle tests |
| `imtools.idutil` | Message and operation ID generation |
| `imtools.formatutil` | Text progress bars |
| `imtools.splitter` | Split a list of strings into fixed-size chunks |
| `imtools.network` | Local IP discovery and client IP extraction from request headers |
| `imtools.httputil` | A small HTTP client for GET and JSON POST requests |
| `imtools.runtimeenv` | Report whether the process runs in Kubernetes, Docker or from source |
| `imtools.version` | Build and version information |
| `imtools.mageutil.console` | Coloured, time-stamped console messages |
| `imtools.mageutil.system` | Platform detection; finding, checking and stopping processes by executable path |
| `imtools.mageutil.paths` | The `_output` directory layout under a project root |
| `imtools.mageutil.startconfig` | Loading `start-config.yml` |
| `imtools.mageutil.bricks` | Starting tools and services, stopping them, checking their processes and ports |

## Examples

```python
import os

from imtools import datautil, stringutil, encrypt, encoding
from imtools.splitter import Splitter

datautil.slice_sub([1, 2, 3, 4], [2, 4])          # [1, 3]
datautil.paginate(list(range(10)), 2, 3)          # [3, 4, 5]

stringutil.format_string("hello", 10, True)       # "hello     "
stringutil.is_valid_email("someone@example.com")  # True

encrypt.md5("test")                               # "098f6bcd4621d373cade4e832627b4f6"
key = os.urandom(16)
ciphertext = encrypt.aes_encrypt(b"Hello, World!", key)
encrypt.aes_decrypt(ciphertext, key)              # b"Hello, World!"

encoding.base64_decode(encoding.base64_encode("text"))  # "text"

[r.item for r in Splitter(2, ["a", "b", "c"]).get_split_result()]
# [["a", "b"], ["c"]]
```

HTTP client:

```python
from imtools.httputil import ClientConfig, HTTPClient

with HTTPClient(ClientConfig(timeout=5)) as client:
    body = client.get("http://localhost:8080/health")
    reply = client.post_return("http://localhost:8080/echo", None, {"key": "value"}, 10)
```

## Service process tooling

Services and tools are described in `start-config.yml`:

```yaml
serviceBinaries:
  api: 1
  rpc: 2
toolBinaries:
  - check-component
maxFileDescriptors: 10000
```

Binaries are looked up under `_output/bin/platforms/<os>/<arch>/` and
`_output/bin/tools/<os>/<arch>/` of the project root:

```python
from imtools.mageutil import bricks
from imtools.mageutil.paths import Paths
from imtools.mageutil.startconfig import StartConfig
from imtools.mageutil.system import ProcessCheckError

config = StartConfig.load("start-config.yml")
paths = Paths.from_root()
paths.create_dirs()

bricks.start_tools(config, paths)          # runs each tool once; raises if one fails
bricks.kill_exist_binaries(config, paths)
bricks.start_binaries(config, paths)       # returns the started processes

try:
    bricks.check_binaries_running(config, paths)
except ProcessCheckError as exc:
    print(exc)
else:
    bricks.print_listened_ports_by_binaries(config, paths)
```

## What this package does not do

There is no command-line program: the service tooling is available only as
the library functions above. The package does not compile service binaries,
does not write `start-config.yml` for you, does not generate protocol buffer
code, and does not change the process's open-file limit from
`max_file_descriptors`; that value is only read from the file.