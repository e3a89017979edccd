import logging
from pathlib import Path
from typing import Optional

import click

from infra_crosscloud.lib.config import CrossCloudConfigException, config_from_dict, get_stack_file_config
from infra_crosscloud.lib.graph import ResourceKey
from infra_crosscloud.lib.graph.exceptions import TopologyException
from infra_crosscloud.modules.multicloud.vpn_bridge.config import VpnBridgeConfig
from infra_crosscloud.modules.multicloud.vpn_bridge.plan import plan_topology
from infra_crosscloud.modules.multicloud.vpn_bridge.types import TopologyPlan

logger = logging.getLogger(__name__)

stack_file = click.Path(exists=True, dir_okay=False, path_type=Path)


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def _load_plan(
    path: Path, stack: Optional[str], base_name: Optional[str] = None
) -> tuple[VpnBridgeConfig, TopologyPlan]:
    stack, raw_config = get_stack_file_config(path, stack)
    logger.debug("raw config for stack %s: %s", stack, raw_config)

    if base_name:
        raw_config = {**raw_config, "baseName": base_name}

    try:
        config = config_from_dict(raw_config, VpnBridgeConfig)
        return config, plan_topology(config)
    except (CrossCloudConfigException, TopologyException) as e:
        raise click.ClickException(f"{path}: {e}") from e


def _echo_keys(label: str, keys: set[ResourceKey], color: str):
    for key in sorted(keys, key=str):
        click.echo(click.style(f"  {label} ", fg=color, bold=True) + str(key))


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")


@cli.command()
@click.argument("settings", type=stack_file)
@click.option("--stack", help="Stack name, defaults to the one in the settings file name")
@click.option("--base-name", help="Override the base name from the settings file")
def plan(settings, stack, base_name):
    """Validate a stack and print its resources in apply order."""
    config, topology = _load_plan(settings, stack, base_name)

    echo_key_value("Base Name", config.base_name)
    echo_key_value("AWS Network", f"{config.aws_cidr} {config.aws_subnet_cidrs}")
    echo_key_value("GCP Network", f"{config.gcp_cidr} {config.gcp_subnet_cidrs}")
    echo_key_value("Resources", len(topology.graph))

    click.echo()

    for key in topology.graph.order():
        record = topology.graph[key]
        upstream = ", ".join(sorted(str(k) for k in record.upstream)) or "-"
        click.echo(f"{key} ({record.kind.__name__}) <- {upstream}")


@cli.command()
@click.argument("current", type=stack_file)
@click.argument("desired", type=stack_file)
@click.option("--stack", help="Stack name, defaults to the one in the settings file names")
def diff(current, desired, stack):
    """Show which resources change between two stack settings files."""
    current_config, current_plan = _load_plan(current, stack)
    desired_config, desired_plan = _load_plan(desired, stack)

    if current_config.base_name != desired_config.base_name:
        click.echo(
            click.style("WARNING: ", fg="red", bold=True)
            + f"base name changes from `{current_config.base_name}` to `{desired_config.base_name}`. "
            "Resource names are their identity, every resource will be destroyed and recreated."
        )
        click.echo()

    topology_diff = current_plan.graph.diff(desired_plan.graph)

    if topology_diff.empty:
        click.echo("No changes.")
        return

    _echo_keys("+", topology_diff.added, "green")
    _echo_keys("-", topology_diff.removed, "red")
    _echo_keys("~", topology_diff.changed, "yellow")

    click.echo()
    echo_key_value("Affected", len(topology_diff.affected))
    _echo_keys("*", topology_diff.affected - topology_diff.changed - topology_diff.added, "cyan")


def run():
    exit(cli())


if __name__ == "__main__":
    run()
