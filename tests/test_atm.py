import pytest

from algolab.atm import (
    Denomination,
    format_withdrawal,
    main,
    parse_denominations,
    read_denominations,
    withdraw,
)

SAMPLE = "500 Nam tram\n100 Mot tram\n200 Hai tram\n\n50 Nam muoi\n"
RULE = "|---|-------------------------|---------|---------|----------|"


def test_parse_reads_values_and_names():
    denominations = parse_denominations(SAMPLE)
    assert [d.value for d in denominations] == [500, 100, 200, 50]
    assert denominations[0].name == "Nam tram"
    assert denominations[3].name == "Nam muoi"


def test_parse_rejects_bad_value():
    with pytest.raises(ValueError):
        parse_denominations("abc Xu\n")


def test_parse_rejects_zero_value():
    with pytest.raises(ValueError):
        parse_denominations("0 Khong\n")


def test_read_matches_parse(tmp_path):
    path = tmp_path / "ATM.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert read_denominations(path) == parse_denominations(SAMPLE)


def test_withdraw_orders_largest_first():
    withdrawal = withdraw(parse_denominations(SAMPLE), 760)
    values = [d.value for d, _ in withdrawal.notes]
    assert values == sorted(values, reverse=True)
    assert len(values) == 4


@pytest.mark.parametrize("amount", [0, 50, 760, 1234, 99999])
def test_withdraw_accounts_for_every_unit(amount):
    withdrawal = withdraw(parse_denominations(SAMPLE), amount)
    assert withdrawal.paid + withdrawal.unpaid == amount
    assert 0 <= withdrawal.unpaid < 50
    assert all(count >= 0 for _, count in withdrawal.notes)


def test_withdraw_greedy_counts():
    denominations = parse_denominations("10 Muoi\n5 Nam\n1 Mot\n")
    withdrawal = withdraw(denominations, 27)
    assert [count for _, count in withdrawal.notes] == [2, 1, 2]
    assert withdrawal.unpaid == 0


def test_withdraw_stops_once_paid():
    withdrawal = withdraw(parse_denominations(SAMPLE), 500)
    assert withdrawal.notes[0][1] == 1
    assert all(count == 0 for _, count in withdrawal.notes[1:])


def test_withdraw_negative_amount_pays_nothing():
    withdrawal = withdraw(parse_denominations(SAMPLE), -30)
    assert all(count == 0 for _, count in withdrawal.notes)
    assert withdrawal.unpaid == -30


def test_withdraw_rejects_nonpositive_face_value():
    with pytest.raises(ValueError):
        withdraw([Denomination(0, "x")], 10)


def test_format_layout():
    withdrawal = withdraw(parse_denominations(SAMPLE), 760)
    lines = format_withdrawal(withdrawal).split("\n")
    assert lines[0] == RULE
    assert lines[2] == RULE
    assert lines[-4] == RULE
    assert len(lines) == 3 + len(withdrawal.notes) + 4
    header = [cell.strip() for cell in lines[1].split("|")[1:6]]
    assert header == ["STT", "Loai Tien", "Menh gia", "So to", "Thanh tien"]
    assert all(len(line) == len(RULE) for line in lines[:-3])


def test_format_leaves_unused_count_blank():
    withdrawal = withdraw(parse_denominations(SAMPLE), 760)
    lines = format_withdrawal(withdrawal).split("\n")
    for (denomination, count), row in zip(withdrawal.notes, lines[3:-4]):
        cells = row.split("|")
        assert cells[2].strip() == denomination.name
        if count == 0:
            assert cells[4] == " " * 9
            assert cells[5].strip() == "0"
        else:
            assert cells[4].strip() == str(count)


def test_format_totals():
    withdrawal = withdraw(parse_denominations(SAMPLE), 760)
    lines = format_withdrawal(withdrawal).split("\n")
    assert lines[-3].startswith("Tien can rut = 760")
    assert lines[-2].split("=")[1].strip() == str(withdrawal.paid)
    assert lines[-1].split("=")[1].strip() == str(withdrawal.unpaid)


def test_main_prints_table(tmp_path, capsys):
    path = tmp_path / "ATM.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert main(["--file", str(path), "760"]) == 0
    out = capsys.readouterr().out
    assert "Tien can rut = 760" in out
    assert RULE in out


def test_main_prompts_for_amount(tmp_path, capsys, monkeypatch):
    path = tmp_path / "ATM.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda prompt: "100")
    assert main(["--file", str(path)]) == 0
    assert "Tien can rut = 100" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main(["--file", str(tmp_path / "absent.txt"), "10"]) == 1