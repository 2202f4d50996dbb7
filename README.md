# wewe

PIN authentication for a PAM-style login flow. A user listed in a YAML
configuration file may sign in with a short PIN, optionally only while the
machine's default gateway is one of the user's trusted networks. Whenever
the PIN path does not apply, the decision is `PamResult.IGNORE`, so the rest
of the authentication stack decides.

## Installation

```
pip install wewe
```

The package depends on PyYAML (configuration) and PyNaCl (Argon2id
verification).

## Configuration

The default configuration path is `/etc/wewe/config.yaml`; an argument of
the form `config_path=<file>` among the module arguments selects another one
(the first such argument wins).

```yaml
users:
  - username: alice
    pin_hash: "$argon2id$v=19$m=19456,t=2,p=1$..."
    trusted_network_check: true
    networks:
      - name: home
        gateway: "02:00:00:00:00:01"
  - username: bob
    pin_hash: "$argon2id$v=19$m=19456,t=2,p=1$..."
    trusted_network_check: false
```

- The document must be a mapping with exactly one key, `users`, holding a
  sequence (it may be empty: `users: []`).
- Each user needs `username` and `trusted_network_check`; `pin_hash` and
  `networks` are optional. Each network needs `name` and `gateway`.
- Unknown keys, missing keys and values of the wrong type are errors.
  `trusted_network_check` accepts YAML booleans and the words
  `true/false`, `yes/no`, `on/off`, `y/n`, `1/0`, `enable(d)/disable(d)`.
- `pin_hash` is an Argon2id hash in the standard encoded form.

Load and inspect a configuration:

```python
from wewe.config import ConfigError, load_config

try:
    config = load_config("/etc/wewe/config.yaml")
except ConfigError as exc:
    print("bad configuration:", exc)
else:
    user = config.find_user("alice")   # a User, or None
```

`load_config` returns a frozen `Config` holding a tuple of `User` entries,
each with a tuple of `Network` entries. Any read, YAML or schema problem
raises `ConfigError`.

## Authentication flow

`wewe.auth.authenticate(pamh, argv=(), gateway_lookup=get_default_gateway_mac)`
returns a `PamResult`:

1. Ask the handle for the user name; if that fails the result is
   `PamResult.USER_UNKNOWN`.
2. Load the configuration; if it cannot be loaded the result is
   `PamResult.IGNORE` (fail open).
3. Users who are not configured, or who have an empty or missing PIN hash,
   give `PamResult.IGNORE`.
4. If `trusted_network_check` is set, `gateway_lookup()` must return a MAC
   address matching (case-insensitively) the `gateway` of one of the user's
   networks; otherwise the result is `PamResult.IGNORE`.
5. The PIN is requested with the prompt `PIN: `; a failure to obtain it
   gives `PamResult.AUTH_ERR`.
6. A PIN that does not verify against the hash gives `PamResult.AUTH_ERR`
   and the handle's token is cleared; a correct PIN gives
   `PamResult.SUCCESS`.

```python
from wewe.auth import PamHandle, PamResult, authenticate

handle = PamHandle(user="alice", conversation=lambda prompt: input(prompt))
result = authenticate(handle, ["config_path=/etc/wewe/config.yaml"])
if result is PamResult.SUCCESS:
    ...
```

`PamHandle` carries `user`, an optional cached `authtok` and an optional
`conversation` callable. `get_user()` raises `PamError` when there is no
user; `get_authtok(prompt)` returns the cached token or asks the
conversation, raising `PamError` when there is no conversation or it
returns `None`; `clear_authtok()` forgets the token. `setcred(pamh, argv)`
always returns `PamResult.SUCCESS`. `verify_pin(pin_hash, pin)` and
`config_path_from_args(argv)` are available on their own.

Messages are written to the standard `logging` loggers `wewe.config` and
`wewe.auth`.

## Gateway discovery

On Linux, `wewe.net.get_default_gateway_mac(route_path, arp_path)` reads
the kernel routing and ARP tables (by default `/proc/net/route` and
`/proc/net/arp`) and returns the default gateway's MAC address, or `None`
when a table cannot be read, there is no default route, or there is no ARP
entry for it. The parsing steps are available separately as
`parse_default_gateway_ip(lines)` and `find_arp_mac(lines, ip)`.

## What this package does not do

- It is a library, not a loadable PAM module: nothing here plugs into a
  system PAM stack by itself. The caller supplies a `PamHandle` and acts on
  the returned `PamResult`.
- It has no command-line tool, and no way to create PIN hashes or write
  configuration files; hashes must be produced with another Argon2id tool.

## Running the tests

```
pip install -e .[test]
pytest
```