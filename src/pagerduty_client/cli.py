import logging
from functools import wraps

import click
import yaml
from pydantic import ValidationError as PydanticValidationError

from pagerduty_client.client import PagerDutyClient
from pagerduty_client.config import ClientConfig
from pagerduty_client.exceptions import NetworkError, PagerDutyClientError
from pagerduty_client.utils import run_async
from pagerduty_types.extensions import Extension, ListExtensionOptions


def load_config(profile) -> ClientConfig:
    if profile is not None:
        return ClientConfig.from_yaml(profile)
    return ClientConfig.from_env()


def read_extension_file(path) -> Extension:
    try:
        with open(path, "r") as file:
            data = yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise click.BadParameter(f"{path} is not valid YAML/JSON: {e}")

    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} does not contain an extension object")

    # accept both the bare object and the {"extension": {...}} envelope
    try:
        return Extension.model_validate(data.get("extension", data))
    except PydanticValidationError as e:
        raise click.BadParameter(f"{path} is not a valid extension: {e}")


def with_client(func):
    """Run an async command body with a PagerDutyClient built from the active profile."""
    @wraps(func)
    @click.pass_context
    def wrapper(ctx, *args, **kwargs):
        config = ctx.obj["CONFIG"]

        async def run():
            async with PagerDutyClient.from_config(config) as client:
                return await func(client, *args, **kwargs)

        try:
            return run_async(run())
        except NetworkError as e:
            click.echo(f"Connection to [{click.style(config.api_url, fg='red')}] failed: {e.message}")
            ctx.exit(1)
        except PagerDutyClientError as e:
            status = e.status_code if e.status_code is not None else "error"
            click.echo(f"[{click.style(str(status), fg='red')}] {e.message}")
            ctx.exit(1)
        except ValueError as e:
            click.echo(f"[{click.style('error', fg='red')}] {e}")
            ctx.exit(1)

    return wrapper


def echo_model(model) -> None:
    click.echo(model.model_dump_json(indent=4, by_alias=True, exclude_none=True))


@click.group()
@click.option(
    "--profile",
    envvar="PAGERDUTY_PROFILE",
    type=click.Path(exists=True),
    help="Path to a profile YAML file (defaults to PAGERDUTY_* environment variables)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log requests")
@click.pass_context
def cli(ctx, profile, verbose):
    """PagerDuty extensions CLI."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["CONFIG"] = load_config(profile)


@cli.command("list")
@click.option("--query", "-q")
@click.option("--extension-object-id")
@click.option("--extension-schema-id")
@click.option("--limit", type=int)
@click.option("--offset", type=int)
@with_client
async def list_extensions(client, query, extension_object_id, extension_schema_id, limit, offset):
    options = ListExtensionOptions(
        query=query,
        extension_object_id=extension_object_id,
        extension_schema_id=extension_schema_id,
        limit=limit,
        offset=offset,
    )
    echo_model(await client.extensions.list(options))


@cli.command("get")
@click.argument("id")
@with_client
async def get_extension(client, id):
    echo_model(await client.extensions.get(id))


@cli.command("create")
@click.argument("file", type=click.Path(exists=True))
@with_client
async def create_extension(client, file):
    echo_model(await client.extensions.create(read_extension_file(file)))


@cli.command("update")
@click.argument("id")
@click.argument("file", type=click.Path(exists=True))
@with_client
async def update_extension(client, id, file):
    echo_model(await client.extensions.update(id, read_extension_file(file)))


@cli.command("delete")
@click.argument("id")
@with_client
async def delete_extension(client, id):
    await client.extensions.delete(id)
    click.echo(f"Deleted extension {id}")


if __name__ == "__main__":
    cli()
