from __future__ import annotations

import pytest

from notfis.models.consignee import Consignee
from notfis.models.shipper import Shipper

CHAVE = "35231212345678000199550010000123451000012345"


def build_record(code: str, fields: list[tuple[int, str]], length: int) -> str:
    """Lay out a fixed-width record: each value is written at its 0-based column.

    Values past ``length`` are cut, so short (truncated) records can be built too.
    """
    chars = list(code.ljust(length))
    for start, value in fields:
        chars[start : start + len(value)] = value
    return "".join(chars)[:length]


def line_311(cnpj: str = "12345678000199", razao: str = "EMBARCADORA TESTE LTDA") -> str:
    return build_record("311", [(3, cnpj), (133, razao.ljust(40))], 240)


def line_312(
    razao: str = "DESTINATARIO EXEMPLO SA",
    cnpj: str = "98765432000155",
    cidade: str = "CAMPINAS",
    estado: str = "SP",
) -> str:
    return build_record(
        "312",
        [(3, razao.ljust(40)), (43, cnpj), (132, cidade.ljust(35)), (185, estado.ljust(9))],
        240,
    )


def line_313(
    numero: str = "00012345",
    serie: str = "1",
    data: str = "25122023",
    volumes: str = "0000100",
    valor: str = "000000000012345",
    peso: str = "0001050",
    cubagem: str = "00125",
    chave: str | None = CHAVE,
    length: int | None = None,
) -> str:
    fields = [
        (29, serie.ljust(3)),
        (32, numero),
        (40, data),
        (78, volumes),
        (85, valor),
        (100, peso),
        (107, cubagem),
    ]
    if chave is not None:
        fields.append((254, chave))
    if length is None:
        length = 298 if chave is not None else 240
    return build_record("313", fields, length)


@pytest.fixture
def shipper() -> Shipper:
    return Shipper(cnpj="12345678000199", razao_social="EMBARCADORA TESTE LTDA")


@pytest.fixture
def consignee() -> Consignee:
    return Consignee(
        razao_social="DESTINATARIO EXEMPLO SA",
        cnpj_cpf="98765432000155",
        cidade="CAMPINAS",
        estado="SP",
    )


@pytest.fixture
def notfis_text() -> str:
    """A small file: header, one shipper, two consignee/invoice pairs and a trailer."""
    lines = [
        build_record("000", [(3, "EMBARCADORA"), (38, "TRANSPORTADORA")], 240),
        build_record("310", [(3, "NOTFI251218")], 240),
        line_311(),
        line_312(),
        line_313(),
        line_312(razao="SEGUNDO DESTINO LTDA", cidade="RECIFE", estado="PE"),
        line_313(
            numero="00012346",
            serie="2",
            data="26122023",
            volumes="0000250",
            valor="000000000100000",
            peso="0020000",
            cubagem="00350",
            chave=None,
        ),
        build_record("318", [(3, "000000000112345")], 240),
    ]
    return "\r\n".join(lines) + "\r\n"


@pytest.fixture
def notfis_file(tmp_path, notfis_text):
    path = tmp_path / "NOTFIS.txt"
    path.write_bytes(notfis_text.encode("iso-8859-1"))
    return path


@pytest.fixture
def config_dir(tmp_path):
    import yaml

    cfg = tmp_path / "config"
    cfg.mkdir()
    (cfg / "notfis.yaml").write_text(
        yaml.dump(
            {
                "encoding": "cp1252",
                "strict_numeric": True,
                "history_limit": 5,
                "log_level": "debug",
            }
        )
    )
    return cfg
