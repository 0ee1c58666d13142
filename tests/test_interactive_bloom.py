from bloom import BloomFilter
from interactive_bloom import BloomFilterShell

def test_add_and_contains(capsys):
    shell = BloomFilterShell()
    shell.onecmd("add hello")
    shell.onecmd("contains hello")
    out = capsys.readouterr().out
    assert "Possibly present" in out

def test_rejected_new_keeps_working_filter(capsys):
    shell = BloomFilterShell()
    shell.onecmd("add hello")
    previous = shell.bloom
    shell.onecmd("new 0")
    assert shell.bloom is previous
    assert not shell.bloom.closed
    assert shell.capacity == 1000
    shell.onecmd("contains hello")
    out = capsys.readouterr().out
    assert "Error: Maximum items must be positive." in out
    assert "Possibly present" in out

def test_new_closes_previous_filter():
    shell = BloomFilterShell()
    previous = shell.bloom
    shell.onecmd("new 10 0.01")
    assert previous.closed
    assert shell.bloom.capacity == 10

def test_contains_on_closed_filter_reports_error(capsys):
    shell = BloomFilterShell()
    shell.bloom.close()
    shell.onecmd("contains hello")
    assert "Error: Bloom filter has been closed." in capsys.readouterr().out

def test_add_past_capacity_reports_error(capsys):
    shell = BloomFilterShell()
    shell.onecmd("new 1")
    shell.onecmd("add a")
    shell.onecmd("add b")
    assert "The maximum number of items (1) has already been reached." in capsys.readouterr().out
    assert isinstance(shell.bloom, BloomFilter)
