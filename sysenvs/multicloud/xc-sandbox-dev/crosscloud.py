# This file is boilerplate. Copy it to any new deployment you create.
# Its purpose is to call the launcher that exists as part of `infra_crosscloud`.
# From there, the module to run is picked from the stack name (`vpn-bridge`).
#
# Stack config lives in `Pulumi.<stack>.yaml` under the stack's namespace, e.g. `vpn-bridge:baseName`.
from infra_crosscloud.launcher import run_active_stack

run_active_stack("multicloud")
