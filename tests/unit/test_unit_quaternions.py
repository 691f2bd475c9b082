"""
Unit tests for Quat and DQuat.

Tests cover axis-angle construction, the Hamilton product and its agreement
with matrix composition, inversion (including the zero quaternion), rotation
matrices in both directions and the axis-angle round trip.
"""

import math
import unittest
import numpy as np

from gltypes import Quat, DQuat, Mat3, Mat4, DMat3, DMat4, vec3, DVec3, Vec4, DVec4, ZeroQuaternionError
from tests.test_fixtures.assertions import assert_matrix_close, assert_quat_close, assert_vector_close


# Rotations covering every branch of the matrix-to-quaternion conversion
SAMPLE_ROTATIONS = [
    (0.3, (0, 0, 1)),
    (2.0, (1, 0, 0)),
    (math.pi, (1, 0, 0)),
    (math.pi, (0, 1, 0)),
    (math.pi, (0, 0, 1)),
    (2.9, (0.6, 0.8, 0)),
    (3.1, (0, 0.28, 0.96)),
    (1.3, (2 / 3, 1 / 3, 2 / 3)),
]


class QuaternionConstructionTests(unittest.TestCase):
    """Tests for constructors, constants and conversions"""

    def testComponents(self):
        """Test named components and iteration order"""
        q = Quat(1, 2, 3, 4)
        self.assertEqual((q.r, q.i, q.j, q.k), (1.0, 2.0, 3.0, 4.0))
        self.assertEqual(q.to_tuple(), (1.0, 2.0, 3.0, 4.0))
        self.assertEqual(list(q), [1.0, 2.0, 3.0, 4.0])
        self.assertEqual(Quat((1, 2, 3, 4)), q)

    def testIdentity(self):
        """Test the identity quaternion"""
        self.assertEqual(Quat.IDENTITY, Quat(1, 0, 0, 0))
        self.assertEqual(DQuat.IDENTITY.to_mat3(), DMat3.IDENTITY)

    def testWrongArityRaises(self):
        """Test construction needs four components"""
        with self.assertRaises(ValueError):
            Quat(1, 0, 0)

    def testAxisRotation(self):
        """Test r = cos(angle/2) and (i, j, k) = sin(angle/2) * axis"""
        q = DQuat.from_axis_rotation(1.0, (0, 0.6, 0.8))
        assert_quat_close(self, q, (math.cos(0.5), 0, 0.6 * math.sin(0.5), 0.8 * math.sin(0.5)), atol=1e-12)
        assert_quat_close(self, DQuat.from_x_rotation(1.0), (math.cos(0.5), math.sin(0.5), 0, 0), atol=1e-12)
        assert_quat_close(self, DQuat.from_y_rotation(1.0), (math.cos(0.5), 0, math.sin(0.5), 0), atol=1e-12)
        assert_quat_close(self, DQuat.from_z_rotation(1.0), (math.cos(0.5), 0, 0, math.sin(0.5)), atol=1e-12)

    def testVec4Conversion(self):
        """Test conversion to and from 4-component vectors"""
        q = Quat(1, 2, 3, 4)
        self.assertEqual(q.to_vec4(), Vec4(1, 2, 3, 4))
        self.assertEqual(DQuat(1, 2, 3, 4).to_vec4(), DVec4(1, 2, 3, 4))
        self.assertEqual(Quat.from_vec4(Vec4(1, 2, 3, 4)), q)
        self.assertEqual(Quat(Vec4(1, 2, 3, 4)), q)
        self.assertEqual(DQuat(DVec4(1, 2, 3, 4)), DQuat(1, 2, 3, 4))

    def testAstype(self):
        """Test precision conversion"""
        self.assertEqual(Quat(1, 2, 3, 4).astype(DQuat), DQuat(1, 2, 3, 4))

    def testRepr(self):
        """Test repr lists named components"""
        self.assertEqual(repr(DQuat(1, 0, 0.5, 0)), "DQuat(r=1.0, i=0.0, j=0.5, k=0.0)")

    def testImmutable(self):
        """Test quaternions reject assignment and deletion"""
        q = Quat.IDENTITY
        with self.assertRaises(AttributeError):
            q.r = 2.0
        with self.assertRaises(AttributeError):
            del q._data


class QuaternionAlgebraTests(unittest.TestCase):
    """Tests for the Hamilton product, inverse and scalar arithmetic"""

    def testHamiltonBasis(self):
        """Test i*j = k, j*k = i, k*i = j and anticommutation"""
        i, j, k = Quat(0, 1, 0, 0), Quat(0, 0, 1, 0), Quat(0, 0, 0, 1)
        self.assertEqual(i * j, k)
        self.assertEqual(j * k, i)
        self.assertEqual(k * i, j)
        self.assertEqual(j * i, -k)
        self.assertEqual(i * i, Quat(-1, 0, 0, 0))

    def testProductComposesLikeMatrices(self):
        """Test (a * b) as a matrix equals a's matrix times b's matrix"""
        a = DQuat.from_axis_rotation(0.8, (0, 0.6, 0.8))
        b = DQuat.from_x_rotation(-1.7)
        assert_matrix_close(self, (a * b).to_mat3(), a.to_mat3() * b.to_mat3(), atol=1e-12)

    def testInverseOfXRotation(self):
        """Test inverse times the original is the identity rotation"""
        q = Quat.from_x_rotation(3.0)
        self.assertEqual(q.inverse() * q, Quat(1, 0, 0, 0))

    def testInverseOfUnitQuaternions(self):
        """Test q * q.inverse() is the identity for unit quaternions"""
        for angle, axis in SAMPLE_ROTATIONS:
            q = DQuat.from_axis_rotation(angle, axis)
            assert_quat_close(self, q * q.inverse(), (1, 0, 0, 0), atol=1e-12)

    def testInverseOfNonUnitQuaternion(self):
        """Test inverse divides by the squared norm"""
        q = DQuat(2, 0, 0, 0)
        self.assertEqual(q.inverse(), DQuat(0.5, 0, 0, 0))
        assert_quat_close(self, DQuat(1, 2, 3, 4).inverse() * DQuat(1, 2, 3, 4), (1, 0, 0, 0), atol=1e-12)

    def testZeroQuaternion(self):
        """Test the zero quaternion cannot be inverted or normalised"""
        with self.assertRaises(ZeroQuaternionError):
            Quat(0, 0, 0, 0).inverse()
        with self.assertRaises(ZeroDivisionError):
            DQuat.ZERO.inverse()
        with self.assertRaises(ZeroQuaternionError):
            Quat.ZERO.normalise()
        with self.assertRaises(ZeroQuaternionError):
            Quat.IDENTITY / Quat.ZERO

    def testDivision(self):
        """Test a / b multiplies by the inverse of b"""
        a = DQuat.from_y_rotation(0.5)
        b = DQuat.from_y_rotation(0.2)
        assert_quat_close(self, a / b, DQuat.from_y_rotation(0.3), atol=1e-12)

    def testScalarArithmetic(self):
        """Test scalar scale, division and remainder, and quaternion sums"""
        q = Quat(1, 2, 3, 4)
        self.assertEqual(q * 2, Quat(2, 4, 6, 8))
        self.assertEqual(2 * q, Quat(2, 4, 6, 8))
        self.assertEqual(q / 2, Quat(0.5, 1, 1.5, 2))
        self.assertEqual(q % 3, Quat(1, 2, 0, 1))
        self.assertEqual(q + q, Quat(2, 4, 6, 8))
        self.assertEqual(q - q, Quat.ZERO)
        self.assertEqual(-q, Quat(-1, -2, -3, -4))

    def testNormsAndConjugate(self):
        """Test conjugate, dot, length and normalise"""
        q = DQuat(1, 2, 3, 4)
        self.assertEqual(q.conjugate(), DQuat(1, -2, -3, -4))
        self.assertEqual(q.dot(DQuat(1, 1, 1, 1)), 10.0)
        self.assertEqual(q.length_squared(), 30.0)
        self.assertAlmostEqual(float(q.length()), math.sqrt(30))
        self.assertAlmostEqual(float(q.normalise().length()), 1.0)

    def testIsClose(self):
        """Test tolerance comparison"""
        self.assertTrue(Quat(1, 0, 0, 0).is_close(Quat(1, 0, 0, 1e-8)))
        self.assertFalse(Quat(1, 0, 0, 0).is_close(Quat(1, 0, 0, 0.1)))


class QuaternionRotationTests(unittest.TestCase):
    """Tests for rotation matrices and axis-angle recovery"""

    def testRotateVector(self):
        """Test rotating vectors about z by a quarter turn"""
        q = Quat.from_z_rotation(math.pi / 2)
        assert_vector_close(self, q.rotate(vec3(1, 0, 0)), (0, 1, 0))
        assert_vector_close(self, q.rotate(vec3(0, 1, 0)), (-1, 0, 0))
        self.assertIsInstance(DQuat.IDENTITY.rotate(DVec3(1, 2, 3)), DVec3)

    def testRotationMatrixSigns(self):
        """Test the quaternion matrix against the textbook x rotation"""
        angle = 0.6
        expected = [[1, 0, 0],
                    [0, math.cos(angle), -math.sin(angle)],
                    [0, math.sin(angle), math.cos(angle)]]
        assert_matrix_close(self, DQuat.from_x_rotation(angle).to_mat3(), expected, atol=1e-12)

    def testMat4Rotation(self):
        """Test to_mat4 embeds the rotation with no translation"""
        q = Quat.from_axis_rotation(1.1, (0, 0.6, 0.8))
        m = q.to_mat4()
        self.assertIsInstance(m, Mat4)
        self.assertEqual(m.to_mat3(), q.to_mat3())
        self.assertEqual(m.position(), (0.0, 0.0, 0.0))

    def testFromRotationMatrixRoundTrip(self):
        """Test matrix to quaternion recovers the rotation up to sign"""
        for angle, axis in SAMPLE_ROTATIONS:
            q = DQuat.from_axis_rotation(angle, axis)
            recovered = DQuat.from_rotation_matrix(q.to_mat3())
            assert_quat_close(self, recovered, q, atol=1e-9, either_sign=True,
                              msg=f"angle {angle} about {axis}")
            recovered = DQuat.from_rotation_matrix(q.to_mat4())
            assert_quat_close(self, recovered, q, atol=1e-9, either_sign=True)

    def testFromRotationMatrixFloat(self):
        """Test single precision matrices convert too"""
        q = Quat.from_axis_rotation(2.5, (0, 0.6, 0.8))
        assert_quat_close(self, Quat.from_rotation_matrix(Mat3.from_rot(q)), q, atol=1e-5, either_sign=True)

    def testAxisAngle(self):
        """Test axis and angle are read back from a quaternion"""
        angle, axis = DQuat.from_axis_rotation(1.2, (0, 0.6, 0.8)).to_axis_angle()
        self.assertAlmostEqual(float(angle), 1.2)
        assert_vector_close(self, axis, (0, 0.6, 0.8), atol=1e-12)
        self.assertIsInstance(axis, DVec3)

    def testAxisAngleOfIdentity(self):
        """Test the identity reports a zero angle about x"""
        angle, axis = Quat.IDENTITY.to_axis_angle()
        self.assertEqual(angle, 0.0)
        self.assertEqual(axis, vec3(1, 0, 0))

    def testMatrixAxisAngleRoundTrip(self):
        """Test axis-angle survives quaternion to matrix to quaternion"""
        for angle, axis in SAMPLE_ROTATIONS:
            matrix = DMat4.from_rot(DQuat.from_axis_rotation(angle, axis))
            recovered_angle, recovered_axis = DQuat.from_rotation_matrix(matrix).to_axis_angle()
            rotation = np.asarray(recovered_axis) * recovered_angle
            expected = np.asarray(axis) * angle
            # q and -q give (angle, axis) and (2*pi - angle, -axis)
            alternative = -np.asarray(axis) * (2 * math.pi - angle)
            self.assertTrue(
                np.allclose(rotation, expected, atol=1e-9) or np.allclose(rotation, alternative, atol=1e-9),
                f"angle {angle} about {axis} came back as {recovered_angle} about {recovered_axis}",
            )


if __name__ == '__main__':
    unittest.main()
