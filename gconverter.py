from edges import read_text

def text_to_bin(infile_name: str, outfile_name: str) -> None:
    # parse first so a malformed file never produces half a binary
    with open(infile_name, 'r') as infile:
        edges = read_text(infile)

    to_bin = lambda num: int(num).to_bytes(length=4, byteorder='little', signed=True)
    with open(outfile_name, 'wb') as outfile:
        for num in (edges.n_verts, len(edges)):
            outfile.write(to_bin(num))
        for e in edges:
            for num in (e.u, e.v, e.weight, int(e.in_f)):
                outfile.write(to_bin(num))

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)

    args = parser.parse_args()

    text_to_bin(args.infile, args.outfile)
