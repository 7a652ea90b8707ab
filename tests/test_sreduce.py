from streamreducer.sreduce import main


def test_reduce_csv(tmp_path):
    inname = tmp_path / 'speed.csv'
    outname = tmp_path / 'reduced.csv'
    rows = ['value,timestamp'] + ['{0},{1}'.format(v, t) for v, t in
                                  [(0, 0), (0, 1), (10, 2), (0, 3), (0, 4), (0, 5), (0, 6)]]
    inname.write_text('\n'.join(rows) + '\n')

    assert main([str(inname), '-o', str(outname), '-n', '5']) == 0
    lines = outname.read_text().splitlines()
    assert lines == ['value,timestamp', '0.0,0.0', '10.0,2.0', '0.0,3.0']


def test_reduce_with_config(tmp_path):
    cfgname = tmp_path / 'reducer.cfg'
    cfgname.write_text('[reducer]\ncapacity = 5\nallowed_error = 1e9\n')
    inname = tmp_path / 'speed.csv'
    inname.write_text('value,timestamp\n0,0\n0,1\n10,2\n0,3\n0,4\n')
    outname = tmp_path / 'reduced.csv'

    assert main([str(inname), '-c', str(cfgname), '-o', str(outname)]) == 0
    assert outname.read_text().splitlines() == ['value,timestamp', '0.0,0.0']


def test_missing_input(tmp_path):
    assert main([]) == 1
    assert main([str(tmp_path / 'nothere.csv')]) == 1
    assert main([str(tmp_path / 'nothere.csv'), '-c', str(tmp_path / 'nothere.cfg')]) == 1
