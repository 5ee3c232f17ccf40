from __future__ import annotations

from decimal import Decimal

import pytest

from notfis.models.settings import Settings
from notfis.services.exceptions import NotfisReadError
from notfis.services.reading import (
    NotfisResult,
    Totals,
    decode_notfis,
    parse_text,
    read_notfis,
    summarize,
)
from tests.conftest import line_311, line_312, line_313


class TestDecode:
    def test_latin1_accents(self):
        assert decode_notfis("SÃO PAULO".encode("iso-8859-1")) == "SÃO PAULO"

    def test_every_byte_decodes(self):
        assert len(decode_notfis(bytes(range(256)))) == 256

    def test_unknown_encoding(self):
        with pytest.raises(NotfisReadError, match="desconhecida"):
            decode_notfis(b"311", "no-such-codec")

    def test_undecodable_bytes(self):
        with pytest.raises(NotfisReadError, match="decodificar"):
            decode_notfis(b"\xff\xfe\xfa", "ascii")


class TestSummarize:
    def test_totals(self, notfis_text):
        result = parse_text(notfis_text)
        assert result.totals == Totals(
            total_notas=2,
            total_cubagem=Decimal("4.75"),
            total_valor=Decimal("1123.45"),
            total_peso=Decimal("210.50"),
            total_volumes=Decimal("3.5"),
        )

    def test_empty(self):
        totals = summarize([])
        assert totals.total_notas == 0
        assert totals.total_cubagem == 0
        assert totals.total_valor == 0


class TestReadNotfis:
    def test_reads_file(self, notfis_file):
        result = read_notfis(notfis_file)
        assert isinstance(result, NotfisResult)
        assert result.file_name == "NOTFIS.txt"
        assert result.path == str(notfis_file.resolve())
        assert not result.is_empty
        assert len(result.invoices) == 2
        assert result.totals.total_valor == Decimal("1123.45")

    def test_decodes_latin1(self, tmp_path):
        content = "\n".join([line_311(), line_312(cidade="SÃO JOSÉ", estado="SC"), line_313()])
        path = tmp_path / "acentos.txt"
        path.write_bytes(content.encode("iso-8859-1"))
        (invoice,) = read_notfis(path).invoices
        assert invoice.consignee.cidade == "SÃO JOSÉ"

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        with pytest.raises(NotfisReadError) as exc:
            read_notfis(path)
        assert exc.value.path == str(path)
        assert "Erro de leitura" in str(exc.value)

    def test_directory_is_read_failure(self, tmp_path):
        with pytest.raises(NotfisReadError):
            read_notfis(tmp_path)

    def test_bad_encoding_setting(self, notfis_file):
        with pytest.raises(NotfisReadError) as exc:
            read_notfis(notfis_file, Settings(encoding="no-such-codec"))
        assert exc.value.path == str(notfis_file)

    def test_empty_file_is_empty_result(self, tmp_path):
        path = tmp_path / "vazio.txt"
        path.write_bytes(b"")
        result = read_notfis(path)
        assert result.is_empty
        assert result.totals.total_notas == 0

    def test_no_invoices_is_empty_result(self, tmp_path):
        path = tmp_path / "sem_notas.txt"
        path.write_text("000HEADER\n311SEM DESTINATARIO\n", encoding="iso-8859-1")
        assert read_notfis(path).is_empty

    def test_strict_setting_is_applied(self, tmp_path):
        content = "\n".join([line_311(), line_312(), line_313(peso="00X1050")])
        path = tmp_path / "strict.txt"
        path.write_text(content, encoding="iso-8859-1")
        assert len(read_notfis(path, Settings(strict_numeric=False)).invoices) == 1
        assert read_notfis(path, Settings(strict_numeric=True)).is_empty
