"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
서비스별 생성기로 AWS 리소스를 조회해 Terraform 임포트 대상 목록을 출력합니다.

명령어 구조:
    tfi --version                   # 버전 표시
    tfi services                    # 지원 서비스 목록
    tfi run waf                     # WAF 리소스 조회 (콘솔 테이블)
    tfi run waf -f json -o out.json # JSON 파일로 저장

Usage:
    $ tfi run waf -p my-profile -r us-east-1
    $ python -m cli.app run waf
"""

import json
import logging
import sys

import click
from click import Context

from core.config import OUTPUT_FORMATS, ImporterConfig, get_version
from core.exceptions import ImporterError, format_error_for_user, is_access_denied, is_throttling

# WARNING 레벨로 설정하여 INFO 로그가 도구 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

VERSION = get_version()


@click.group()
@click.version_option(VERSION, prog_name="tfi")
@click.pass_context
def cli(ctx: Context) -> None:
    """TFI - AWS 리소스를 Terraform 임포트 대상으로 변환"""
    ctx.ensure_object(dict)
    ctx.obj["config"] = ImporterConfig.from_env()


@cli.command("services")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def services_command(as_json: bool) -> None:
    """지원 서비스 목록"""
    from core.generators import list_services

    services = list_services()
    if as_json:
        click.echo(json.dumps(services))
        return
    for name in services:
        click.echo(name)


@cli.command("run")
@click.argument("service")
@click.option("-p", "--profile", default=None, help="AWS 프로파일 (기본: 환경 변수/기본 체인)")
@click.option("-r", "--region", default=None, help="리전 (기본: us-east-1)")
@click.option("-f", "--format", "fmt", type=click.Choice(OUTPUT_FORMATS), default=None, help="출력 형식")
@click.option("-o", "--output", default=None, help="출력 파일 경로 (지정 시 json)")
@click.option("-v", "--verbose", is_flag=True, help="상세 로그 출력")
@click.pass_context
def run_command(
    ctx: Context,
    service: str,
    profile: str | None,
    region: str | None,
    fmt: str | None,
    output: str | None,
    verbose: bool,
) -> None:
    """SERVICE 리소스를 조회해 임포트 대상 목록 출력"""
    from cli.ui import get_logger, print_error

    if output and fmt is None:
        fmt = "json"

    base = ctx.obj["config"] if ctx.obj else ImporterConfig.from_env()
    try:
        config = base.merge(profile=profile, region=region, format=fmt, output=output, verbose=verbose or None)
    except ImporterError as e:
        print_error(format_error_for_user(e))
        sys.exit(1)

    if config.verbose:
        get_logger("core", logging.DEBUG)
        get_logger("cli", logging.DEBUG)

    try:
        resources = _collect(service, config)
    except ImporterError as e:
        logger.debug("collection failed", exc_info=True)
        print_error(format_error_for_user(e))
        hint = _failure_hint(e, config)
        if hint:
            print_error(hint)
        sys.exit(1)

    _render(service, resources, config)


def _collect(service: str, config: ImporterConfig):
    """생성기를 실행해 리소스 목록 반환"""
    from core.aws import create_session, get_account_id
    from core.generators import get_generator

    generator_cls = get_generator(service)
    session = create_session(config.profile, config.region)
    if config.verbose:
        logger.debug("account=%s region=%s", get_account_id(session, config.region), config.region)
    generator = generator_cls(session, region=config.region)
    return generator.init_resources()


def _failure_hint(error: ImporterError, config: ImporterConfig) -> str | None:
    """실패 원인별 추가 안내 메시지"""
    if is_access_denied(error):
        return f"프로파일 '{config.profile or '(default)'}'에 {config.region} 리전의 list 권한이 있는지 확인하세요"
    if is_throttling(error):
        return "전송 재시도 후에도 요청이 제한되었습니다. 잠시 후 다시 실행하세요"
    return None


def _render(service: str, resources, config: ImporterConfig) -> None:
    """설정된 형식으로 결과 출력"""
    from cli.output import to_json, write_json
    from cli.ui import print_info, print_resources_table, print_success

    if config.format == "json":
        if config.output:
            try:
                path = write_json(config.output, resources)
            except OSError as e:
                raise click.ClickException(f"파일 저장 실패: {config.output} ({e})") from e
            print_success(f"{len(resources)}개 리소스를 {path}에 저장했습니다")
        else:
            click.echo(to_json(resources))
        return

    if not resources:
        print_info(f"{service}: 리소스가 없습니다")
        return
    print_resources_table(resources, title=f"{service} ({config.region})")
    print_success(f"{len(resources)}개 리소스를 찾았습니다")


if __name__ == "__main__":
    cli()
