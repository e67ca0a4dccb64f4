"""
Test utilities for the rsimport test suite.

Sample Rust modules and call-counting stand-ins for the reader and the
parser, used to check that each module is read and parsed exactly once.
"""

import sys
from collections import Counter
from pathlib import Path
from textwrap import dedent
from typing import List

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from rsimport.frontend.parser import Parser
from rsimport.shared.nodes import SourceFile
from rsimport.utils.io_utils import read_source_file


SHAPES_SOURCE = dedent('''\
    //! Shapes used across the importer tests.

    use std::fmt;

    /// A point in the plane.
    #[derive(Debug, Clone, Copy)]
    pub struct Point {
        pub x: f64,
        pub y: f64,
    }

    pub struct Meters(pub f64);

    struct Marker;

    pub enum Shape {
        Circle { center: Point, radius: f64 },
        Square(Point, f64),
    }

    pub const ORIGIN: Point = Point { x: 0.0, y: 0.0 };

    static mut COUNTER: u32 = 0;

    pub trait Area {
        fn area(&self) -> f64;
    }

    impl Area for Shape {
        fn area(&self) -> f64 {
            match self {
                Shape::Circle { radius, .. } => 3.14 * radius * radius,
                Shape::Square(_, side) => side * side,
            }
        }
    }

    impl fmt::Display for Point {
        fn fmt(&self, f: &mut fmt::Formatter<'_>) -> fmt::Result {
            write!(f, "({}, {})", self.x, self.y)
        }
    }

    impl Point {
        pub fn new(x: f64, y: f64) -> Self {
            Point { x, y }
        }
    }

    pub fn distance(a: &Point, b: &Point) -> f64 {
        ((a.x - b.x).powi(2) + (a.y - b.y).powi(2)).sqrt()
    }

    type Pair = (Point, Point);
''')

SHAPES_SYMBOLS = {
    "Point", "Meters", "Marker", "Shape", "ORIGIN", "COUNTER", "Area",
    "impl_Area", "impl_Display", "impl_Point", "distance",
}


def rust(source: str) -> str:
    """Dedent an inline Rust snippet"""
    return dedent(source).lstrip("\n")


class CountingReader:
    """read_source_file stand-in that records every path it reads"""

    def __init__(self):
        self.calls: List[Path] = []

    def __call__(self, path: Path) -> str:
        self.calls.append(Path(path))
        return read_source_file(path)

    def count(self, path: Path) -> int:
        return Counter(self.calls)[Path(path)]


class CountingParser:
    """Parser wrapper that counts parse() calls per source file name"""

    def __init__(self, parser: Parser):
        self.parser = parser
        self.calls: List[str] = []

    def parse(self, source: str, source_file: str = "<string>") -> SourceFile:
        self.calls.append(source_file)
        return self.parser.parse(source, source_file)
