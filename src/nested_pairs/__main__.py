from nested_pairs.scripts.render_tuple import main


if __name__ == '__main__':
    raise SystemExit(main())
